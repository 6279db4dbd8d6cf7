"""
Compact semantic version codec.

This package packs a (major, minor, patch) triple into a single 32- or 64-bit
integer with an embedded format tag, and unpacks it back.

Key components:
- BitLayout / RangeCursor: field width tables and the ranges they produce
- write_field / read_field: single-field bit codec
- VersionRecord / FormatTag: the record and its format identifier
- encode_to_* / decode_from_*: public integer conversions

Exception hierarchy:
- SemverCodecError: Base exception for all codec errors
- FieldOverflowError: A component does not fit its field
- UnknownMagicError: Decoded format tag is not recognized
- UnsupportedMagicError: Decoded format tag is recognized but not implemented
- IntegerRangeError: Integer outside the requested representation
- UnsupportedWidthError: No layout for the requested width
"""

from compact_semver.codec.exceptions import (
    FieldOverflowError,
    IntegerRangeError,
    SemverCodecError,
    UnknownMagicError,
    UnsupportedMagicError,
    UnsupportedWidthError,
)
from compact_semver.codec.fields import read_field, write_field
from compact_semver.codec.layout import (
    FIELD_NAMES,
    LAYOUT_32,
    LAYOUT_64,
    WIDTHS_32,
    WIDTHS_64,
    BitLayout,
    BitRange,
    RangeCursor,
    get_layout,
)
from compact_semver.codec.record import (
    SUPPORTED_FORMAT_TAGS,
    FormatTag,
    VersionRecord,
    validate_format_tag,
)
from compact_semver.codec.version_codec import (
    decode,
    decode_from_i32,
    decode_from_i64,
    decode_from_u32,
    decode_from_u64,
    encode,
    encode_to_i32,
    encode_to_i64,
    encode_to_u32,
    encode_to_u64,
    pack_bytes,
    reinterpret,
    unpack_bytes,
)

__all__ = [
    # Exceptions
    "SemverCodecError",
    "FieldOverflowError",
    "UnknownMagicError",
    "UnsupportedMagicError",
    "IntegerRangeError",
    "UnsupportedWidthError",
    # Layout
    "FIELD_NAMES",
    "WIDTHS_32",
    "WIDTHS_64",
    "LAYOUT_32",
    "LAYOUT_64",
    "BitLayout",
    "BitRange",
    "RangeCursor",
    "get_layout",
    # Field codec
    "read_field",
    "write_field",
    # Record
    "FormatTag",
    "SUPPORTED_FORMAT_TAGS",
    "VersionRecord",
    "validate_format_tag",
    # Conversions
    "encode",
    "decode",
    "encode_to_i32",
    "encode_to_u32",
    "encode_to_i64",
    "encode_to_u64",
    "decode_from_i32",
    "decode_from_u32",
    "decode_from_i64",
    "decode_from_u64",
    "pack_bytes",
    "unpack_bytes",
    "reinterpret",
]
