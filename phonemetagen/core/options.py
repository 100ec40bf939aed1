# file: phonemetagen/core/options.py
"""
Command line options for a single metadata build.

The accepted shape is fixed:

    <ignored> <inputXmlFile> <outputDir> <basename> [--const-name=<NAME>]

where `<basename>` is `<type>`, `test_<type>` or `lite_<type>`. The constant
name flag is a single token, either `--const-name=NAME` or `"--const-name NAME"`.
Parsing is total: it either returns a complete `Options` or raises `UsageError`,
and it never touches the file system.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from phonemetagen.core.types import MetadataType, type_names
from phonemetagen.core.variant import Variant

DEFAULT_CONSTANT_NAME = "METADATA"

_BASENAME = re.compile(r"(?:(test|lite)_)?([a-z_]+)", re.IGNORECASE)
_CONSTANT_NAME_FLAG = re.compile(r"--const-name[ =]([A-Za-z_][A-Za-z0-9_]*)")

_RUST_KEYWORDS = frozenset(
    {
        "as", "async", "await", "break", "const", "continue", "crate", "dyn", "else",
        "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop",
        "match", "mod", "move", "mut", "pub", "ref", "return", "self", "Self",
        "static", "struct", "super", "trait", "true", "type", "unsafe", "use",
        "where", "while",
    }
)


class UsageError(ValueError):
    """Raised when the command line does not have the expected shape."""


def is_valid_constant_name(name: str) -> bool:
    """Return True if `name` can be used as a Rust constant identifier."""

    if name == "_" or name in _RUST_KEYWORDS:
        return False
    return re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name) is not None


def parse_basename(token: str) -> tuple[MetadataType, Variant] | None:
    """
    Split a basename such as `test_alternate_format` into its type and variant.
    """

    m = _BASENAME.fullmatch(token)
    if m is None:
        return None
    variant = Variant.parse(m.group(1))
    metadata_type = MetadataType.parse(m.group(2))
    if variant is None or metadata_type is None:
        return None
    return metadata_type, variant


def usage(command_name: str) -> str:
    return (
        f"Usage: {command_name} <inputXmlFile> <outputDir> "
        "( <type> | test_<type> | lite_<type> ) [--const-name=<nameOfMetadataConstant>] "
        f"where <type> is one of: {', '.join(type_names())}"
    )


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable options for one metadata build."""

    input_path: str
    output_dir: str
    type: MetadataType
    variant: Variant
    constant_name: str = DEFAULT_CONSTANT_NAME

    @classmethod
    def parse(cls, command_name: str, args: Sequence[str]) -> Options:
        """
        Parse raw command tokens.

        Raises:
            UsageError: on any other arity, an unknown basename, or an invalid
                constant name. The message names `command_name` and lists every
                metadata type.
        """

        tokens = list(args)
        constant_name = DEFAULT_CONSTANT_NAME
        if len(tokens) == 5:
            for i, token in enumerate(tokens):
                m = _CONSTANT_NAME_FLAG.fullmatch(token)
                if m is not None and is_valid_constant_name(m.group(1)):
                    constant_name = m.group(1)
                    del tokens[i]
                    break

        if len(tokens) == 4:
            parsed = parse_basename(tokens[3])
            if parsed is not None:
                metadata_type, variant = parsed
                return cls(
                    input_path=tokens[1],
                    output_dir=tokens[2],
                    type=metadata_type,
                    variant=variant,
                    constant_name=constant_name,
                )

        raise UsageError(usage(command_name))
