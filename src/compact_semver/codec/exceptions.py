"""
Exception hierarchy for the version codec.

Every codec failure is raised as a subclass of SemverCodecError, carrying a
stable error code, troubleshooting tips and a context dictionary so callers
(and the CLI) can report the failing field or tag precisely.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from compact_semver.codec.record import FormatTag


class SemverCodecError(Exception):
    """
    Base exception for all codec errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code for categorization.
        troubleshooting_tips: List of actionable suggestions.
        context: Additional context dictionary.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "CODEC_000",
        troubleshooting_tips: Optional[list[str]] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.troubleshooting_tips = troubleshooting_tips or []
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with troubleshooting guidance."""
        parts = [f"[{self.error_code}] {self.message}"]

        if self.troubleshooting_tips:
            parts.append("\n\nTroubleshooting:")
            for i, tip in enumerate(self.troubleshooting_tips, 1):
                parts.append(f"  {i}. {tip}")

        if self.context:
            context_items = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"\n\nContext: {context_items}")

        return "\n".join(parts) if len(parts) > 1 else parts[0]

    def __str__(self) -> str:
        return self._format_message()


class FieldOverflowError(SemverCodecError):
    """
    A field value does not fit in its bit range.

    Attributes:
        field: Name of the overflowing field, if known.
        value: The rejected value.
        width: Bit width of the target range.
    """

    def __init__(
        self,
        value: int,
        width: int,
        field: Optional[str] = None,
        error_code: str = "CODEC_001",
    ) -> None:
        self.field = field
        self.value = value
        self.width = width

        ctx: dict[str, Any] = {"value": value, "width": width}
        if field:
            ctx["field"] = field

        tips = [f"Values must be in range 0-{(1 << width) - 1} for this layout"]
        if width < 16:
            tips.append("Use the 64-bit layout for components up to 65535")

        subject = f"Field '{field}'" if field else "Value"
        super().__init__(
            message=f"{subject} does not fit in {width} bits",
            error_code=error_code,
            troubleshooting_tips=tips,
            context=ctx,
        )


class UnknownMagicError(SemverCodecError):
    """
    The decoded format tag is not a member of FormatTag.

    Attributes:
        raw_value: Numeric value found in the tag field.
    """

    def __init__(self, raw_value: int, error_code: str = "CODEC_002") -> None:
        self.raw_value = raw_value

        super().__init__(
            message=f"Unknown format tag {raw_value}",
            error_code=error_code,
            troubleshooting_tips=[
                "Check that the value was produced by this codec",
                "Check that the decode width matches the encode width",
            ],
            context={"raw_value": raw_value},
        )


class UnsupportedMagicError(SemverCodecError):
    """
    The decoded format tag is known but not implemented by this release.

    Attributes:
        tag: The decoded FormatTag member.
    """

    def __init__(self, tag: "FormatTag", error_code: str = "CODEC_003") -> None:
        self.tag = tag

        super().__init__(
            message=f"Unsupported format tag {tag.name}",
            error_code=error_code,
            troubleshooting_tips=[
                "Only format tag V0 can be decoded by this release",
                "Check that the decode width matches the encode width",
            ],
            context={"tag": tag.name},
        )


class IntegerRangeError(SemverCodecError):
    """An integer is outside the range of the requested representation."""

    def __init__(
        self,
        value: Any,
        width: int,
        signed: bool,
        error_code: str = "CODEC_004",
    ) -> None:
        self.value = value
        self.width = width
        self.signed = signed

        kind = f"{'i' if signed else 'u'}{width}"
        super().__init__(
            message=f"{value!r} is not a valid {kind} value",
            error_code=error_code,
            troubleshooting_tips=[
                "Use the signed variant for negative values",
                "Check that the value was produced with the same width",
            ],
            context={"value": value, "representation": kind},
        )


class UnsupportedWidthError(SemverCodecError):
    """No layout exists for the requested width."""

    def __init__(self, width: Any, error_code: str = "CODEC_005") -> None:
        self.width = width

        super().__init__(
            message=f"No layout for width {width!r}",
            error_code=error_code,
            troubleshooting_tips=["Supported widths are 32 and 64 bits (4 and 8 bytes)"],
            context={"width": width},
        )
