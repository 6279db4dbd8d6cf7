"""
Pydantic models for compact-semver configuration validation.

This module defines type-safe configuration models that ensure
configuration correctness at load time.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Valid log output formats."""

    JSON = "json"
    CONSOLE = "console"


class OutputFormat(str, Enum):
    """Valid output formats for CLI results."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format",
    )
    output: str = Field(
        default="stderr",
        description="Log output destination (stdout, stderr, or file path)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class CodecConfig(BaseModel):
    """Configuration for the version codec."""

    model_config = ConfigDict(extra="forbid")

    width: Literal[32, 64] = Field(
        default=32,
        description="Packed integer width in bits",
    )
    signed: bool = Field(
        default=True,
        description="Emit signed integers",
    )
    strict_overflow: bool = Field(
        default=False,
        description="Reject components equal to 2**field_width",
    )


class OutputConfig(BaseModel):
    """Configuration for CLI output."""

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(
        default=OutputFormat.TABLE,
        description="Default output format",
    )


class SemverConfig(BaseModel):
    """Root configuration model for compact-semver."""

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    codec: CodecConfig = Field(
        default_factory=CodecConfig,
        description="Codec configuration",
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output configuration",
    )
