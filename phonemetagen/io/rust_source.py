# file: phonemetagen/io/rust_source.py
"""
Rust source emission for serialized metadata.

The generated file is a licence banner followed by a single constant:

    pub const METADATA: [u8; 4] = [
      0xCA, 0xFE, 0xBA, 0xBE
    ];

Bytes are written as `0xHH` with upper case hex digits, 13 per line.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from phonemetagen import __version__
from phonemetagen.core.options import Options
from phonemetagen.core.types import MetadataType

logger = logging.getLogger(__name__)

BYTES_PER_LINE = 13
SOURCE_SUFFIX = ".rs"

_LICENSE_NOTICE = """\
//
// Licensed under the Apache License, Version 2.0 (the "License");
// you may not use this file except in compliance with the License.
// You may obtain a copy of the License at
//
// http://www.apache.org/licenses/LICENSE-2.0
//
// Unless required by applicable law or agreed to in writing, software
// distributed under the License is distributed on an "AS IS" BASIS,
// WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
// See the License for the specific language governing permissions and
// limitations under the License.
"""


def copyright_notice(first_year: int, second_year: int) -> str:
    return (
        f"// Copyright (C) {first_year} The Libphonenumber Authors\n"
        f"// Copyright (C) {second_year} Kashin Vladislav (Rust adaptation author)\n"
        + _LICENSE_NOTICE
    )


def generated_banner(metadata_type: MetadataType) -> str:
    return (
        copyright_notice(metadata_type.copyright_year, metadata_type.copyright_second_year)
        + "\n"
        + f"// This file is automatically generated by phonemetagen {__version__}.\n"
        + "// Please don't modify it directly.\n"
        + "\n"
    )


def emit_static_array_data(data: bytes) -> str:
    """
    Render the body of the byte array.

    Every line starts with a two space indent and the block ends with a single
    newline. An empty payload renders as an empty string.
    """

    if not data:
        return ""
    parts: list[str] = []
    separator = "  "
    for i, b in enumerate(data):
        parts.append(separator)
        parts.append(f"0x{b:02X}")
        separator = ",\n  " if (i + 1) % BYTES_PER_LINE == 0 else ", "
    parts.append("\n")
    return "".join(parts)


def render_source(metadata_type: MetadataType, data: bytes, constant_name: str) -> str:
    return (
        generated_banner(metadata_type)
        + f"pub const {constant_name}: [u8; {len(data)}] = [\n"
        + emit_static_array_data(data)
        + "];\n"
    )


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """Serialized metadata bound to the constant name it is emitted under."""

    type: MetadataType
    data: bytes
    constant_name: str

    def render(self) -> str:
        return render_source(self.type, self.data, self.constant_name)

    def output_source_file(self, out: TextIO) -> None:
        """Write the Rust source to `out`. The stream is not closed."""

        out.write(self.render())
        out.flush()


def artifact_path(options: Options) -> Path:
    """
    Return the file a build writes to.

    `output_dir` is normally a directory and the file is named after the
    variant-qualified basename. A path already ending in `.rs` is used as is.
    """

    out = Path(options.output_dir)
    if out.suffix == SOURCE_SUFFIX:
        return out
    return out / f"{options.variant.basename(options.type)}{SOURCE_SUFFIX}"


def write_source_file(path: Path, text: str) -> None:
    """
    Atomically write `text` to `path`, creating parent directories.

    The content goes to a temporary file in the target directory which then
    replaces `path`; on failure the temporary file is removed and `path` is left
    untouched.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Wrote %s", path)
