"""
Unit tests for the codec exception hierarchy.
"""

import pytest

from compact_semver.codec.exceptions import (
    FieldOverflowError,
    IntegerRangeError,
    SemverCodecError,
    UnknownMagicError,
    UnsupportedMagicError,
    UnsupportedWidthError,
)
from compact_semver.codec.record import FormatTag


class TestSemverCodecError:
    """Tests for the base SemverCodecError class."""

    def test_basic_error(self) -> None:
        error = SemverCodecError(message="Test error message", error_code="TEST_001")

        assert "Test error message" in str(error)
        assert "TEST_001" in str(error)

    def test_error_with_tips(self) -> None:
        error = SemverCodecError(
            message="Test error",
            troubleshooting_tips=["Try this", "Or try that"],
        )

        error_str = str(error)
        assert "Troubleshooting" in error_str
        assert "1. Try this" in error_str
        assert "2. Or try that" in error_str

    def test_error_with_context(self) -> None:
        error = SemverCodecError(message="Test error", context={"key1": "value1"})

        assert "Context: key1=value1" in str(error)

    def test_plain_message(self) -> None:
        assert str(SemverCodecError("boom")) == "[CODEC_000] boom"


class TestSubclasses:
    """Tests for the specific codec errors."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (FieldOverflowError(1025, 10, field="major"), "CODEC_001"),
            (UnknownMagicError(13), "CODEC_002"),
            (UnsupportedMagicError(FormatTag.V3), "CODEC_003"),
            (IntegerRangeError(-1, 32, signed=False), "CODEC_004"),
            (UnsupportedWidthError(16), "CODEC_005"),
        ],
    )
    def test_hierarchy_and_codes(self, error: SemverCodecError, code: str) -> None:
        assert isinstance(error, SemverCodecError)
        assert error.error_code == code
        assert code in str(error)

    def test_field_overflow_details(self) -> None:
        error = FieldOverflowError(1025, 10, field="patch")

        assert error.message == "Field 'patch' does not fit in 10 bits"
        assert error.context == {"value": 1025, "width": 10, "field": "patch"}
        assert "0-1023" in str(error)

    def test_field_overflow_suggests_wider_layout(self) -> None:
        narrow = FieldOverflowError(1025, 10, field="major")
        assert any("64-bit layout" in tip for tip in narrow.troubleshooting_tips)

        wide = FieldOverflowError(65537, 16, field="major")
        assert wide.troubleshooting_tips == ["Values must be in range 0-65535 for this layout"]

    def test_field_overflow_without_field(self) -> None:
        error = FieldOverflowError(5, 2)
        assert error.field is None
        assert error.message.startswith("Value")
        assert "field" not in error.context

    def test_unknown_magic_details(self) -> None:
        error = UnknownMagicError(13)
        assert error.raw_value == 13
        assert error.context == {"raw_value": 13}

    def test_unsupported_magic_details(self) -> None:
        error = UnsupportedMagicError(FormatTag.V3)
        assert error.tag is FormatTag.V3
        assert "V3" in error.message

    def test_integer_range_details(self) -> None:
        error = IntegerRangeError(-1, 32, signed=False)
        assert error.context["representation"] == "u32"
        assert "-1 is not a valid u32 value" in str(error)

    def test_can_be_caught_as_base(self) -> None:
        with pytest.raises(SemverCodecError):
            raise UnknownMagicError(7)
