# file: phonemetagen/config.py
"""
Configuration loader.

Design goals:
- Support `.env` for local development.
- Support YAML for the converter command and the batch artifact list.
- Validate configuration with pydantic.

Precedence (highest to lowest):
1. OS environment variables
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import json
import os
import shlex
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field
from pydantic import ConfigDict as PydanticConfigDict

from phonemetagen.core.loader import CommandConverter


class ArtifactSettings(BaseModel):
    """One entry of a `generate-all` batch."""

    source: str
    basename: str
    constant_name: str = "METADATA"


def default_artifacts() -> list[ArtifactSettings]:
    return [
        ArtifactSettings(
            source="PhoneNumberMetadata.xml", basename="metadata", constant_name="METADATA"
        ),
        ArtifactSettings(
            source="PhoneNumberMetadataForTesting.xml",
            basename="test_metadata",
            constant_name="TEST_METADATA",
        ),
    ]


class MetagenSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    # General
    log_level: str = "INFO"
    json_logging: bool = False

    # Converter
    converter_command: list[str] = Field(default_factory=list)
    converter_lite_args: list[str] = Field(default_factory=lambda: ["--lite"])
    converter_timeout_seconds: float = 120.0

    # Batch generation
    resources_dir: Path = Path("resources")
    generated_dir: Path = Path("src/generated/metadata")
    artifacts: list[ArtifactSettings] = Field(default_factory=default_artifacts)

    def converter(self) -> CommandConverter:
        return CommandConverter(
            self.converter_command,
            lite_args=self.converter_lite_args,
            timeout_seconds=self.converter_timeout_seconds,
        )


_ENV_MAP: dict[str, str] = {
    "PHONEMETAGEN_LOG_LEVEL": "log_level",
    "PHONEMETAGEN_JSON_LOGGING": "json_logging",
    # JSON list or shell-quoted string: ["java", "-jar", "tools.jar", "{input}"]
    "PHONEMETAGEN_CONVERTER_COMMAND": "converter_command",
    "PHONEMETAGEN_CONVERTER_LITE_ARGS": "converter_lite_args",
    "PHONEMETAGEN_CONVERTER_TIMEOUT_SECONDS": "converter_timeout_seconds",
    "PHONEMETAGEN_RESOURCES_DIR": "resources_dir",
    "PHONEMETAGEN_GENERATED_DIR": "generated_dir",
}

_ARGV_FIELDS = frozenset({"converter_command", "converter_lite_args"})


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    # dotenv_values does not mutate os.environ; it just parses the file.
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if isinstance(k, str) and isinstance(v, str):
            out[k] = v
    return out


def _parse_argv(raw: str) -> list[str]:
    stripped = raw.strip()
    if stripped.startswith("["):
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(p) for p in parsed]
    return shlex.split(stripped)


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if field_name in _ARGV_FIELDS:
            try:
                target[field_name] = _parse_argv(raw)
            except ValueError:
                # Unbalanced quotes; keep the lower-precedence value.
                continue
        else:
            target[field_name] = raw


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> MetagenSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path.
        env_path: Optional .env path (default: `.env` if present).
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    # YAML path resolution:
    # - explicit yaml_path wins
    # - else PHONEMETAGEN_CONFIG from OS env wins
    # - else PHONEMETAGEN_CONFIG from .env
    if yaml_path is None:
        cfg = os.environ.get("PHONEMETAGEN_CONFIG") or dotenv.get("PHONEMETAGEN_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    # OS env overrides .env/YAML
    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return MetagenSettings.model_validate(data)
