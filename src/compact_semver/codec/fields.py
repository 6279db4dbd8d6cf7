"""
Field codec: moves one unsigned integer into or out of a bit range.

Bit addressing follows the packed format: offset ``i`` lives in byte
``i // 8`` at position ``i % 8`` counted from that byte's most significant
bit. A range that crosses byte boundaries is split into per-byte segments;
the least significant bits of the value go into the lowest-addressed
segment, and each segment keeps its numeric significance inside its byte.
"""

from typing import Iterator, Optional

from compact_semver.codec.exceptions import FieldOverflowError
from compact_semver.codec.layout import BitRange


def _segments(bit_range: BitRange) -> Iterator[tuple[int, int, int]]:
    """Yield ``(byte_index, shift, width)`` for each byte the range touches."""
    pos = bit_range.start
    while pos < bit_range.stop:
        index = pos // 8
        end = min(bit_range.stop, (index + 1) * 8)
        yield index, (index + 1) * 8 - end, end - pos
        pos = end


def write_field(
    buffer: bytearray,
    bit_range: BitRange,
    value: int,
    field: Optional[str] = None,
    strict: bool = False,
) -> None:
    """
    Store ``value`` into ``bit_range`` of ``buffer``.

    Only the bits of ``bit_range`` are modified. Without ``strict`` a value of
    exactly ``2**width`` is accepted and stored as its low ``width`` bits
    (zero), as existing encoded values expect; ``strict`` rejects it.

    Args:
        buffer: Target buffer, mutated in place
        bit_range: Destination range
        value: Unsigned value to store
        field: Field name reported on overflow
        strict: Reject values that do not fit exactly

    Raises:
        FieldOverflowError: If the value is negative or too large
    """
    limit = 1 << bit_range.width
    if value < 0 or value > limit or (strict and value == limit):
        raise FieldOverflowError(value, bit_range.width, field=field)

    remaining = value & (limit - 1)
    for index, shift, width in _segments(bit_range):
        mask = ((1 << width) - 1) << shift
        chunk = (remaining & ((1 << width) - 1)) << shift
        buffer[index] = (buffer[index] & ~mask & 0xFF) | chunk
        remaining >>= width


def read_field(buffer: bytes, bit_range: BitRange) -> int:
    """Return the unsigned value stored in ``bit_range`` of ``buffer``."""
    value = 0
    offset = 0
    for index, shift, width in _segments(bit_range):
        value |= ((buffer[index] >> shift) & ((1 << width) - 1)) << offset
        offset += width
    return value
