"""
compact-semver logging infrastructure.

This package provides structured logging for the CLI and configuration
layers, with console output for development and JSON output for CI.
"""

from compact_semver.logging.setup import (
    get_logger,
    log_error,
    log_execution_context,
    log_execution_end,
    log_execution_start,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_execution_start",
    "log_execution_end",
    "log_error",
    "log_execution_context",
]
