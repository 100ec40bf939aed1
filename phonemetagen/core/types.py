# file: phonemetagen/core/types.py
"""
Metadata types that can be generated.

Each type carries the two copyright years written into the banner of the
generated source file. Generated files are named after the type's canonical
(lowercase) name.
"""

from __future__ import annotations

from enum import Enum


class MetadataType(Enum):
    """The known kinds of metadata artifact."""

    METADATA = "metadata"
    ALTERNATE_FORMAT = "alternate_format"
    SHORT_NUMBERS = "short_numbers"

    def __str__(self) -> str:
        return self.value

    @property
    def copyright_year(self) -> int:
        """Year in which this metadata type was first introduced."""

        return _COPYRIGHT_YEARS[self][0]

    @property
    def copyright_second_year(self) -> int:
        """Year in which this metadata type was modified for Rust."""

        return _COPYRIGHT_YEARS[self][1]

    @classmethod
    def parse(cls, name: str | None) -> MetadataType | None:
        """
        Parse a type from its canonical name, case-insensitively.

        Returns None when nothing matches; callers treat that as a parse failure.
        """

        if not name:
            return None
        lowered = name.lower()
        for t in cls:
            if t.value == lowered:
                return t
        return None


_COPYRIGHT_YEARS: dict[MetadataType, tuple[int, int]] = {
    MetadataType.METADATA: (2011, 2025),
    MetadataType.ALTERNATE_FORMAT: (2012, 2025),
    MetadataType.SHORT_NUMBERS: (2013, 2025),
}


def type_names() -> list[str]:
    return [str(t) for t in MetadataType]
