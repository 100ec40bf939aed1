# file: phonemetagen/__init__.py
"""
phonemetagen - phone number metadata compiler for rlibphonenumber.

This package turns libphonenumber XML metadata into Rust source files that embed
the serialized metadata as `pub const` byte arrays, and wires the generated
files into a single `mod.rs` module.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
