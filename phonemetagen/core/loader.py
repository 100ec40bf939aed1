# file: phonemetagen/core/loader.py
"""
Loading serialized metadata bytes.

The XML-to-protobuf conversion itself is done by an external converter (the
libphonenumber metadata tooling). This module only defines the converter
interface, a subprocess-backed implementation, and the loader that buffers the
converter output in memory.
"""

from __future__ import annotations

import io
import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Sequence

logger = logging.getLogger(__name__)

INPUT_PLACEHOLDER = "{input}"


class ConversionError(RuntimeError):
    """Raised when the external converter rejects or cannot process the input."""


class MetadataConverter(ABC):
    """
    Converts a metadata XML file into a serialized `PhoneMetadataCollection`.

    Implementations write the serialized bytes to `out` and must drop example
    numbers from the output when `strip_examples` is set.
    """

    name: str

    @abstractmethod
    def write_collection(self, input_path: str, strip_examples: bool, out: BinaryIO) -> None:
        raise NotImplementedError


class CommandConverter(MetadataConverter):
    """
    Converter that runs an external command and reads the payload from stdout.

    `command` is an argv template; `{input}` is replaced by the input path (the
    path is appended when no placeholder is present). `lite_args` are appended
    when example data must be stripped.
    """

    name = "command"

    def __init__(
        self,
        command: Sequence[str],
        *,
        lite_args: Sequence[str] = ("--lite",),
        timeout_seconds: float | None = 120.0,
    ) -> None:
        self.command = list(command)
        self.lite_args = list(lite_args)
        self.timeout_seconds = timeout_seconds

    def argv(self, input_path: str, strip_examples: bool) -> list[str]:
        if not self.command:
            raise ConversionError(
                "No metadata converter configured (set PHONEMETAGEN_CONVERTER_COMMAND)."
            )
        if any(INPUT_PLACEHOLDER in part for part in self.command):
            argv = [part.replace(INPUT_PLACEHOLDER, input_path) for part in self.command]
        else:
            argv = [*self.command, input_path]
        if strip_examples:
            argv.extend(self.lite_args)
        return argv

    def write_collection(self, input_path: str, strip_examples: bool, out: BinaryIO) -> None:
        argv = self.argv(input_path, strip_examples)
        logger.debug("Running converter: %s", shlex.join(argv))
        try:
            proc = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout_seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ConversionError(f"Converter executable not found: {argv[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ConversionError(
                f"Converter timed out after {self.timeout_seconds}s: {argv[0]}"
            ) from exc

        if proc.returncode != 0:
            detail = _last_line(proc.stderr) or f"exit status {proc.returncode}"
            raise ConversionError(f"Converter failed for {input_path}: {detail}")
        out.write(proc.stdout)


def _last_line(raw: bytes) -> str:
    lines = [ln.strip() for ln in raw.decode("utf-8", errors="replace").splitlines()]
    lines = [ln for ln in lines if ln]
    return lines[-1] if lines else ""


def load_metadata_bytes(
    input_path: str, strip_examples: bool, converter: MetadataConverter
) -> bytes:
    """
    Load the metadata XML file and convert its contents to bytes.

    Raises:
        FileNotFoundError: if `input_path` does not exist.
        OSError: for other I/O failures, unchanged.
        ConversionError: if the converter fails for any other reason.
    """

    if not Path(input_path).is_file():
        raise FileNotFoundError(f"Metadata input not found: {input_path}")

    with io.BytesIO() as out:
        try:
            converter.write_collection(input_path, strip_examples, out)
        except (OSError, ConversionError):
            raise
        except Exception as exc:
            raise ConversionError(
                f"{converter.name} converter: {type(exc).__name__}: {exc}"
            ) from exc
        data = out.getvalue()

    logger.debug(
        "Loaded %d bytes of metadata from %s via %s converter",
        len(data),
        input_path,
        converter.name,
    )
    return data
