"""
Bit layouts for packed versions.

A layout is a fixed table of field widths (format tag, major, minor, patch).
Field ranges are obtained by prefix-summing the table, starting at bit 0,
so ranges are contiguous and never overlap.

Example:
    >>> cursor = RangeCursor(WIDTHS_64)
    >>> next(cursor)
    BitRange(start=0, stop=4)
    >>> next(cursor)
    BitRange(start=4, stop=20)
"""

from dataclasses import dataclass

from compact_semver.codec.exceptions import UnsupportedWidthError

# Width tables: tag, major, minor, patch
WIDTHS_32: tuple[int, ...] = (2, 10, 10, 10)
WIDTHS_64: tuple[int, ...] = (4, 16, 16, 16)

FIELD_NAMES: tuple[str, ...] = ("format_tag", "major", "minor", "patch")


@dataclass(frozen=True)
class BitRange:
    """Half-open range of bit offsets ``[start, stop)``."""

    start: int
    stop: int

    @property
    def width(self) -> int:
        return self.stop - self.start

    @property
    def capacity(self) -> int:
        """Largest value the range can hold."""
        return (1 << self.width) - 1


class RangeCursor:
    """
    Forward, non-restartable cursor over the ranges of a width table.

    Each advance returns ``[previous_end, previous_end + width)`` for the
    next width in the table. Once all widths are consumed the cursor raises
    StopIteration.
    """

    def __init__(self, widths: tuple[int, ...]) -> None:
        self._widths = widths
        self._idx = 0
        self._previous_end = 0

    def __iter__(self) -> "RangeCursor":
        return self

    def __next__(self) -> BitRange:
        if self._idx >= len(self._widths):
            raise StopIteration

        end = self._previous_end + self._widths[self._idx]
        bit_range = BitRange(self._previous_end, end)
        self._idx += 1
        self._previous_end = end
        return bit_range


@dataclass(frozen=True)
class BitLayout:
    """
    A width table bound to the integer size it packs into.

    Attributes:
        total_bits: Width of the target integer (32 or 64).
        widths: Field widths in layout order.
    """

    total_bits: int
    widths: tuple[int, ...]

    def __post_init__(self) -> None:
        if sum(self.widths) > self.total_bits:
            raise ValueError(
                f"Field widths {self.widths} exceed {self.total_bits} bits"
            )

    @property
    def byte_size(self) -> int:
        return self.total_bits // 8

    @property
    def used_bits(self) -> int:
        return sum(self.widths)

    @property
    def unused_bits(self) -> int:
        """Trailing bits no field covers; always zero when encoded."""
        return self.total_bits - self.used_bits

    def cursor(self) -> RangeCursor:
        """Return a fresh cursor over this layout's field ranges."""
        return RangeCursor(self.widths)

    def ranges(self) -> dict[str, BitRange]:
        """Map each field name to its bit range."""
        return dict(zip(FIELD_NAMES, self.cursor()))

    def capacity(self, field: str) -> int:
        """Return the largest value ``field`` can hold in this layout."""
        try:
            return self.ranges()[field].capacity
        except KeyError:
            raise KeyError(f"Unknown field: {field}") from None


LAYOUT_32 = BitLayout(total_bits=32, widths=WIDTHS_32)
LAYOUT_64 = BitLayout(total_bits=64, widths=WIDTHS_64)

_LAYOUTS: dict[int, BitLayout] = {
    32: LAYOUT_32,
    64: LAYOUT_64,
}


def get_layout(width: int) -> BitLayout:
    """
    Return the layout for a target integer width.

    Args:
        width: Integer width in bits (32 or 64)

    Raises:
        UnsupportedWidthError: If no layout exists for ``width``
    """
    try:
        return _LAYOUTS[width]
    except (KeyError, TypeError):
        raise UnsupportedWidthError(width) from None
