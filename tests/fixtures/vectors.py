"""
Known packed values shared by the codec tests.

Each encode vector is ``((major, minor, patch), signed_value, little_endian_bytes)``.
"""

from compact_semver.codec.fields import write_field
from compact_semver.codec.layout import get_layout

ENCODE_VECTORS_32 = [
    ((1, 0, 20), 83886081, bytes([0x01, 0x00, 0x00, 0x05])),
    ((1, 1, 5), 16843009, bytes([0x01, 0x01, 0x01, 0x01])),
    ((1023, 1, 5), 16904511, bytes([0x3F, 0xF1, 0x01, 0x01])),
    ((0, 0, 1023), -16580608, bytes([0x00, 0x00, 0x03, 0xFF])),
    ((1023, 1023, 1023), -193, bytes([0x3F, 0xFF, 0xFF, 0xFF])),
    ((0, 0, 0), 0, bytes(4)),
]

ENCODE_VECTORS_64 = [
    ((1, 1, 5), 21474902017, bytes([0x01, 0x00, 0x01, 0x00, 0x05, 0x00, 0x00, 0x00])),
    ((0, 0, 0), 0, bytes(8)),
]

# (value, width, signed, expected exception name, expected attribute value)
DECODE_ERROR_VECTORS = [
    (16904511, 64, True, "UnsupportedMagicError", "V3"),
    (128, 32, True, "UnsupportedMagicError", "V2"),
    (64, 32, True, "UnsupportedMagicError", "V1"),
    (208, 64, True, "UnknownMagicError", 13),
    (-1, 64, True, "UnknownMagicError", 15),
]


def make_buffer_with_tag(width: int, raw_tag: int) -> bytes:
    """Return a zeroed buffer of the given layout with only the tag field set."""
    layout = get_layout(width)
    buffer = bytearray(layout.byte_size)
    write_field(buffer, next(layout.cursor()), raw_tag)
    return bytes(buffer)
