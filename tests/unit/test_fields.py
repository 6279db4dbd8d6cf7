"""
Unit tests for the field codec.

Covers bit placement across byte boundaries, isolation of neighbouring
bits, and the overflow boundary in lenient and strict modes.
"""

import pytest

from compact_semver.codec.exceptions import FieldOverflowError
from compact_semver.codec.fields import read_field, write_field
from compact_semver.codec.layout import BitRange


class TestWriteField:
    """Tests for write_field."""

    def test_value_within_single_byte(self) -> None:
        """Test a 2-bit field at offset 0 lands in the top bits of byte 0."""
        buffer = bytearray(4)
        write_field(buffer, BitRange(0, 2), 3)
        assert buffer == bytearray([0xC0, 0x00, 0x00, 0x00])

    def test_low_chunk_goes_to_lowest_byte(self) -> None:
        """Test a field crossing bytes stores its low bits first."""
        buffer = bytearray(4)
        write_field(buffer, BitRange(22, 32), 20)
        # 20 = 0b101_00: low two bits (00) in byte 2, remaining 0b101 in byte 3
        assert buffer == bytearray([0x00, 0x00, 0x00, 0x05])

    def test_chunk_keeps_significance_in_byte(self) -> None:
        """Test the high chunk of a field sits in the upper bits of its byte."""
        buffer = bytearray(4)
        write_field(buffer, BitRange(2, 12), 1023)
        assert buffer == bytearray([0x3F, 0xF0, 0x00, 0x00])

    def test_other_bits_untouched(self) -> None:
        """Test only the target range is modified."""
        buffer = bytearray(b"\xff" * 4)
        write_field(buffer, BitRange(2, 12), 0)
        assert buffer == bytearray([0xC0, 0x0F, 0xFF, 0xFF])

    def test_full_bytes(self) -> None:
        """Test a field covering whole bytes."""
        buffer = bytearray(8)
        write_field(buffer, BitRange(4, 20), 0xABCD)
        assert read_field(buffer, BitRange(4, 20)) == 0xABCD
        assert read_field(buffer, BitRange(0, 4)) == 0
        assert read_field(buffer, BitRange(20, 36)) == 0

    def test_max_value_accepted(self) -> None:
        buffer = bytearray(4)
        write_field(buffer, BitRange(2, 12), 1023)
        assert read_field(buffer, BitRange(2, 12)) == 1023

    def test_power_of_two_boundary_stored_as_zero(self) -> None:
        """Test 2**width is accepted and truncated to zero in lenient mode."""
        buffer = bytearray(b"\xff" * 4)
        write_field(buffer, BitRange(2, 12), 1024)
        assert read_field(buffer, BitRange(2, 12)) == 0
        assert read_field(buffer, BitRange(0, 2)) == 3

    def test_power_of_two_boundary_rejected_in_strict_mode(self) -> None:
        buffer = bytearray(4)
        with pytest.raises(FieldOverflowError):
            write_field(buffer, BitRange(2, 12), 1024, strict=True)
        assert buffer == bytearray(4)

    def test_overflow(self) -> None:
        """Test values above 2**width raise FieldOverflowError."""
        buffer = bytearray(4)
        with pytest.raises(FieldOverflowError) as exc_info:
            write_field(buffer, BitRange(2, 12), 1025, field="major")

        error = exc_info.value
        assert error.field == "major"
        assert error.value == 1025
        assert error.width == 10
        assert buffer == bytearray(4)

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(FieldOverflowError):
            write_field(bytearray(4), BitRange(0, 2), -1)


class TestReadField:
    """Tests for read_field."""

    def test_reads_each_field(self) -> None:
        """Test reading the fields of a packed 1023.1.5."""
        buffer = bytes([0x3F, 0xF1, 0x01, 0x01])
        assert read_field(buffer, BitRange(0, 2)) == 0
        assert read_field(buffer, BitRange(2, 12)) == 1023
        assert read_field(buffer, BitRange(12, 22)) == 1
        assert read_field(buffer, BitRange(22, 32)) == 5

    def test_any_pattern_is_valid(self) -> None:
        """Test reading never fails, even for all-ones buffers."""
        buffer = b"\xff" * 8
        assert read_field(buffer, BitRange(0, 4)) == 15
        assert read_field(buffer, BitRange(36, 52)) == 65535
