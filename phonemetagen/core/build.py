# file: phonemetagen/core/build.py
"""
The metadata build command: parse options, load bytes, render, write.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from phonemetagen.core.loader import ConversionError, MetadataConverter, load_metadata_bytes
from phonemetagen.core.options import Options, UsageError
from phonemetagen.io.rust_source import GeneratedArtifact, artifact_path, write_source_file

logger = logging.getLogger(__name__)

BUILD_ERRORS = (UsageError, ConversionError, OSError)


class MetadataBuildCommand:
    """
    Generates one Rust source file from a metadata XML file.

    The XML is converted to bytes by `converter` and written into the output
    file as a static byte array.
    """

    def __init__(
        self, converter: MetadataConverter, *, command_name: str = "BuildMetadataRustFromXml"
    ) -> None:
        self.converter = converter
        self.command_name = command_name

    def run(self, options: Options) -> Path:
        data = load_metadata_bytes(
            options.input_path, options.variant.strips_examples, self.converter
        )
        artifact = GeneratedArtifact(
            type=options.type, data=data, constant_name=options.constant_name
        )
        path = artifact_path(options)
        write_source_file(path, artifact.render())
        return path

    def start(self, args: Sequence[str]) -> bool:
        """
        Run the command for raw `args` and report success.

        Failures are logged as a single line; nothing is written on failure.
        """

        try:
            options = Options.parse(self.command_name, args)
            self.run(options)
        except BUILD_ERRORS as exc:
            logger.error("%s", describe_failure(exc))
            return False
        return True


def describe_failure(exc: BaseException) -> str:
    """Return the one-line diagnostic shown for a failed build."""

    if isinstance(exc, ConversionError):
        return f"Conversion failed: {exc}"
    if isinstance(exc, OSError):
        return f"I/O error: {exc}"
    return str(exc)
