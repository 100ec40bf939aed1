# file: phonemetagen/core/variant.py
"""
Metadata variants.

A variant shapes the generated content (full, test-only, or "lite" without
example numbers) and prefixes the basename of the generated file.
"""

from __future__ import annotations

from enum import Enum

from phonemetagen.core.types import MetadataType


class Variant(Enum):
    # The value is the basename template.
    FULL = "%s"
    TEST = "test_%s"
    LITE = "lite_%s"

    def basename(self, metadata_type: MetadataType) -> str:
        """
        Return the basename of a type qualified by this variant.

        For FULL this is just the type name.
        """

        return self.value % metadata_type.value

    @property
    def strips_examples(self) -> bool:
        return self is Variant.LITE

    @classmethod
    def parse(cls, name: str | None) -> Variant | None:
        """
        Parse a variant name.

        "test" and "lite" match case-insensitively; None or "" means FULL.
        Anything else returns None.
        """

        if name is None or name == "":
            return cls.FULL
        lowered = name.lower()
        if lowered == "test":
            return cls.TEST
        if lowered == "lite":
            return cls.LITE
        return None
