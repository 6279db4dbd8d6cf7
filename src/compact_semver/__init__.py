"""
compact-semver

Packs semantic versions (major, minor, patch) into a single 32- or 64-bit
integer for memory-constrained storage and compact protocol headers.
"""

from compact_semver.codec import (
    FieldOverflowError,
    FormatTag,
    SemverCodecError,
    UnknownMagicError,
    UnsupportedMagicError,
    VersionRecord,
    decode_from_i32,
    decode_from_i64,
    decode_from_u32,
    decode_from_u64,
    encode_to_i32,
    encode_to_i64,
    encode_to_u32,
    encode_to_u64,
)
from compact_semver.version import __version__

__all__ = [
    "__version__",
    "VersionRecord",
    "FormatTag",
    "SemverCodecError",
    "FieldOverflowError",
    "UnknownMagicError",
    "UnsupportedMagicError",
    "encode_to_i32",
    "encode_to_u32",
    "encode_to_i64",
    "encode_to_u64",
    "decode_from_i32",
    "decode_from_u32",
    "decode_from_i64",
    "decode_from_u64",
]
