"""
Version record and format tag types.

VersionRecord is an immutable pydantic model compared structurally. Components
must be non-negative; upper bounds depend on the layout and are checked
when encoding.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from compact_semver.codec.exceptions import UnknownMagicError, UnsupportedMagicError


class FormatTag(IntEnum):
    """
    Packed data format identifier.

    Only V0 is implemented; V1-V3 are reserved so that values written by a
    future layout fail to decode instead of being misread.
    """

    V0 = 0
    V1 = 1
    V2 = 2
    V3 = 3

    @classmethod
    def default(cls) -> FormatTag:
        return cls.V0


SUPPORTED_FORMAT_TAGS: frozenset[FormatTag] = frozenset({FormatTag.V0})


def validate_format_tag(raw_value: int) -> FormatTag:
    """
    Convert a raw tag field value into a supported FormatTag.

    Raises:
        UnknownMagicError: If the value is not a FormatTag member
        UnsupportedMagicError: If the tag is known but not implemented
    """
    try:
        tag = FormatTag(raw_value)
    except ValueError:
        raise UnknownMagicError(raw_value) from None

    if tag not in SUPPORTED_FORMAT_TAGS:
        raise UnsupportedMagicError(tag)

    return tag


class VersionRecord(BaseModel):
    """
    A major/minor/patch triple.

    Conversions:
        To an integer: to_i32, to_u32, to_i64, to_u64
        From an integer: from_i32, from_u32, from_i64, from_u64

    Example:
        >>> VersionRecord(major=1, minor=0, patch=20).to_i32()
        83886081
    """

    model_config = ConfigDict(frozen=True, strict=True)

    major: Annotated[int, Field(ge=0)] = Field(
        description="Major version (incompatible changes)",
    )
    minor: Annotated[int, Field(ge=0)] = Field(
        description="Minor version (compatible additions)",
    )
    patch: Annotated[int, Field(ge=0)] = Field(
        description="Patch version (compatible fixes)",
    )
    format_tag: FormatTag = Field(
        default=FormatTag.V0,
        description="Format the record was decoded from",
    )

    @classmethod
    def new(cls, major: int, minor: int, patch: int) -> VersionRecord:
        """Positional constructor."""
        return cls(major=major, minor=minor, patch=patch)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    # Integer conversions

    def to_i32(self, strict: bool = False) -> int:
        from compact_semver.codec.version_codec import encode_to_i32

        return encode_to_i32(self, strict=strict)

    def to_u32(self, strict: bool = False) -> int:
        from compact_semver.codec.version_codec import encode_to_u32

        return encode_to_u32(self, strict=strict)

    def to_i64(self, strict: bool = False) -> int:
        from compact_semver.codec.version_codec import encode_to_i64

        return encode_to_i64(self, strict=strict)

    def to_u64(self, strict: bool = False) -> int:
        from compact_semver.codec.version_codec import encode_to_u64

        return encode_to_u64(self, strict=strict)

    @classmethod
    def from_i32(cls, value: int) -> VersionRecord:
        from compact_semver.codec.version_codec import decode_from_i32

        return decode_from_i32(value)

    @classmethod
    def from_u32(cls, value: int) -> VersionRecord:
        from compact_semver.codec.version_codec import decode_from_u32

        return decode_from_u32(value)

    @classmethod
    def from_i64(cls, value: int) -> VersionRecord:
        from compact_semver.codec.version_codec import decode_from_i64

        return decode_from_i64(value)

    @classmethod
    def from_u64(cls, value: int) -> VersionRecord:
        from compact_semver.codec.version_codec import decode_from_u64

        return decode_from_u64(value)

