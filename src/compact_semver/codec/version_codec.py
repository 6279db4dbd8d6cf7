"""
Version codec: conversions between VersionRecord and packed integers.

Encoding writes the default format tag followed by major, minor and patch
into a zeroed buffer using the layout for the requested width, then reads
the buffer as a little-endian integer. Decoding reverses this and validates
the format tag.

Signed and unsigned integers of the same width share identical bytes; the
32-bit and 64-bit encodings of a record are unrelated because the field
widths differ.

Example:
    >>> from compact_semver.codec import VersionRecord, encode_to_i32, decode_from_i32
    >>> encode_to_i32(VersionRecord(major=1, minor=1, patch=5))
    16843009
    >>> decode_from_i32(83886081)
    VersionRecord(major=1, minor=0, patch=20, format_tag=<FormatTag.V0: 0>)
"""

from construct import ConstructError, FormatField, Int32sl, Int32ul, Int64sl, Int64ul

from compact_semver.codec.exceptions import IntegerRangeError, UnsupportedWidthError
from compact_semver.codec.fields import read_field, write_field
from compact_semver.codec.layout import BitLayout, get_layout
from compact_semver.codec.record import FormatTag, VersionRecord, validate_format_tag

# Little-endian integer formats keyed by (width, signed)
_INTEGER_FORMATS: dict[tuple[int, bool], FormatField] = {
    (32, True): Int32sl,
    (32, False): Int32ul,
    (64, True): Int64sl,
    (64, False): Int64ul,
}


def _integer_format(width: int, signed: bool) -> FormatField:
    try:
        return _INTEGER_FORMATS[(width, signed)]
    except (KeyError, TypeError):
        raise UnsupportedWidthError(width) from None


def _to_bytes(value: int, width: int, signed: bool) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise IntegerRangeError(value, width, signed)
    try:
        return _integer_format(width, signed).build(value)
    except ConstructError:
        raise IntegerRangeError(value, width, signed) from None


def _from_bytes(data: bytes, width: int, signed: bool) -> int:
    return _integer_format(width, signed).parse(data)


def reinterpret(value: int, width: int, signed: bool) -> int:
    """
    Reinterpret the bytes of an integer with the opposite signedness.

    Args:
        value: Integer to convert
        width: Integer width in bits
        signed: Whether ``value`` is currently signed

    Returns:
        The integer with identical bytes and the other signedness
    """
    return _from_bytes(_to_bytes(value, width, signed), width, not signed)


# =============================================================================
# Byte-level packing
# =============================================================================


def _write_record(
    buffer: bytearray,
    layout: BitLayout,
    record: VersionRecord,
    strict: bool,
) -> None:
    cursor = layout.cursor()
    # Records always re-encode with the default tag
    write_field(buffer, next(cursor), FormatTag.default().value, field="format_tag")
    write_field(buffer, next(cursor), record.major, field="major", strict=strict)
    write_field(buffer, next(cursor), record.minor, field="minor", strict=strict)
    write_field(buffer, next(cursor), record.patch, field="patch", strict=strict)


def _read_record(buffer: bytes, layout: BitLayout) -> VersionRecord:
    cursor = layout.cursor()
    raw_tag = read_field(buffer, next(cursor))
    major = read_field(buffer, next(cursor))
    minor = read_field(buffer, next(cursor))
    patch = read_field(buffer, next(cursor))

    return VersionRecord(
        major=major,
        minor=minor,
        patch=patch,
        format_tag=validate_format_tag(raw_tag),
    )


def pack_bytes(record: VersionRecord, width: int = 32, strict: bool = False) -> bytes:
    """
    Pack a record into the 4- or 8-byte buffer of the given layout.

    Raises:
        FieldOverflowError: If major, minor or patch does not fit
        UnsupportedWidthError: If ``width`` is not 32 or 64
    """
    layout = get_layout(width)
    buffer = bytearray(layout.byte_size)
    _write_record(buffer, layout, record, strict)
    return bytes(buffer)


def unpack_bytes(data: bytes) -> VersionRecord:
    """
    Decode a 4- or 8-byte buffer; the layout follows from its length.

    Raises:
        UnknownMagicError: If the tag is not a FormatTag member
        UnsupportedMagicError: If the tag is not implemented
        UnsupportedWidthError: If ``data`` is not 4 or 8 bytes long
    """
    layout = get_layout(len(data) * 8)
    return _read_record(bytes(data), layout)


# =============================================================================
# Integer conversions
# =============================================================================


def encode(
    record: VersionRecord,
    width: int = 32,
    signed: bool = True,
    strict: bool = False,
) -> int:
    """
    Encode a record as a packed integer.

    Args:
        record: Version to encode
        width: Integer width in bits (32 or 64)
        signed: Return a signed integer instead of an unsigned one
        strict: Reject field values equal to ``2**width``

    Raises:
        FieldOverflowError: If major, minor or patch does not fit
        UnsupportedWidthError: If ``width`` is not 32 or 64
    """
    value = _from_bytes(pack_bytes(record, width, strict), width, signed=True)
    if signed:
        return value
    return reinterpret(value, width, signed=True)


def decode(value: int, width: int = 32, signed: bool = True) -> VersionRecord:
    """
    Decode a packed integer into a record.

    Args:
        value: Packed integer
        width: Integer width in bits (32 or 64)
        signed: Whether ``value`` is a signed integer

    Raises:
        IntegerRangeError: If ``value`` does not fit the representation
        UnknownMagicError: If the tag is not a FormatTag member
        UnsupportedMagicError: If the tag is not implemented
        UnsupportedWidthError: If ``width`` is not 32 or 64
    """
    get_layout(width)  # reject unknown widths before range checks
    if not signed:
        value = reinterpret(value, width, signed=False)
    return unpack_bytes(_to_bytes(value, width, signed=True))


def encode_to_i32(record: VersionRecord, strict: bool = False) -> int:
    return encode(record, 32, signed=True, strict=strict)


def encode_to_u32(record: VersionRecord, strict: bool = False) -> int:
    return encode(record, 32, signed=False, strict=strict)


def encode_to_i64(record: VersionRecord, strict: bool = False) -> int:
    return encode(record, 64, signed=True, strict=strict)


def encode_to_u64(record: VersionRecord, strict: bool = False) -> int:
    return encode(record, 64, signed=False, strict=strict)


def decode_from_i32(value: int) -> VersionRecord:
    return decode(value, 32, signed=True)


def decode_from_u32(value: int) -> VersionRecord:
    return decode(value, 32, signed=False)


def decode_from_i64(value: int) -> VersionRecord:
    return decode(value, 64, signed=True)


def decode_from_u64(value: int) -> VersionRecord:
    return decode(value, 64, signed=False)
