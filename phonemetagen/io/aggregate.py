# file: phonemetagen/io/aggregate.py
"""
`mod.rs` generation.

Wires the generated metadata files into one Rust module and re-exports their
constants. Test-variant files are only compiled into test builds.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from phonemetagen.core.options import UsageError, is_valid_constant_name, parse_basename
from phonemetagen.core.variant import Variant
from phonemetagen.io.rust_source import copyright_notice, write_source_file

MODULE_FILE = "mod.rs"
MODULE_COPYRIGHT_YEARS = (2009, 2025)


@dataclass(frozen=True, slots=True)
class ModuleEntry:
    module_name: str
    constant_name: str
    test_only: bool = False


def entry_for(basename: str, constant_name: str) -> ModuleEntry:
    """
    Build a module entry for a generated file.

    Raises:
        UsageError: if the basename or constant name is not valid.
    """

    parsed = parse_basename(basename)
    if parsed is None:
        raise UsageError(f"Not a metadata basename: {basename!r}")
    if not is_valid_constant_name(constant_name):
        raise UsageError(f"Not a valid constant name: {constant_name!r}")
    _, variant = parsed
    return ModuleEntry(
        module_name=basename.lower(),
        constant_name=constant_name,
        test_only=variant is Variant.TEST,
    )


def render_module(entries: Iterable[ModuleEntry]) -> str:
    items = list(entries)
    lines: list[str] = [copyright_notice(*MODULE_COPYRIGHT_YEARS)]

    for e in items:
        if e.test_only:
            lines.append("// use only in test case")
            lines.append("#[cfg(test)]")
        lines.append(f"mod {e.module_name};")
        lines.append("")

    for e in items:
        if e.test_only:
            lines.append("#[cfg(test)]")
        lines.append(f"pub use {e.module_name}::{e.constant_name};")

    return "\n".join(lines) + "\n"


def write_module(directory: Path, entries: Iterable[ModuleEntry]) -> Path:
    path = directory / MODULE_FILE
    write_source_file(path, render_module(entries))
    return path
