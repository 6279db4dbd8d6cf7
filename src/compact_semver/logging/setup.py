"""
Logging setup and configuration for compact-semver.

This module configures structured logging using structlog, providing
both human-readable console output and machine-parseable JSON output.
"""

import logging
import sys
import time
import uuid
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any, Generator, Optional, TextIO

import structlog

# Session ID for correlating logs within a single execution
_session_id: Optional[str] = None

# Track if logging has been configured
_logging_configured = False

# File opened for a path output; closed on reconfiguration
_log_file: Optional[TextIO] = None


def get_session_id() -> str:
    """Get or create a session ID for the current execution."""
    global _session_id
    if _session_id is None:
        _session_id = str(uuid.uuid4())[:8]
    return _session_id


def setup_logging(
    level: str = "INFO",
    format_type: str = "console",
    output: str = "stderr",
) -> None:
    """
    Configure logging for compact-semver.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format ("json" for CI, "console" for development)
        output: Output destination ("stdout", "stderr", or file path)
    """
    global _logging_configured, _log_file

    log_level = getattr(logging, level.upper(), logging.INFO)

    if output == "stdout":
        stream = sys.stdout
    elif output == "stderr":
        stream = sys.stderr
    else:
        stream = open(output, "a", encoding="utf-8")  # noqa: SIM115

    previous_file = _log_file
    _log_file = None if stream in (sys.stdout, sys.stderr) else stream

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format_type == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up later reconfiguration
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=log_level,
        force=True,
    )

    if previous_file is not None:
        previous_file.close()

    structlog.contextvars.bind_contextvars(session_id=get_session_id())

    _logging_configured = True

    logger = get_logger(__name__)
    logger.debug(
        "logging_initialized",
        level=level,
        format=format_type,
        output=output,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy structlog logger; the session id is merged from context vars
    """
    if not _logging_configured:
        setup_logging()

    return structlog.get_logger(name)


def log_execution_start(command: str, params: Optional[dict] = None) -> float:
    """
    Log the start of a command execution.

    Args:
        command: Command being executed
        params: Command parameters

    Returns:
        Start timestamp for duration calculation
    """
    logger = get_logger("compact_semver.execution")
    start_time = time.perf_counter()

    logger.info(
        "execution_started",
        command=command,
        params=params,
        timestamp=datetime.now(tz=UTC).isoformat(),
    )

    return start_time


def log_execution_end(
    command: str,
    start_time: float,
    status: str = "success",
    result: Optional[dict] = None,
) -> None:
    """
    Log the end of a command execution.

    Args:
        command: Command that was executed
        start_time: Start timestamp from log_execution_start
        status: Execution status (success, error)
        result: Optional result summary
    """
    logger = get_logger("compact_semver.execution")
    duration_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        "execution_completed",
        command=command,
        status=status,
        duration_ms=round(duration_ms, 2),
        result=result,
        timestamp=datetime.now(tz=UTC).isoformat(),
    )


def log_error(
    error: Exception,
    context: Optional[dict] = None,
    command: Optional[str] = None,
) -> None:
    """
    Log an error with full context.

    Codec errors contribute their error code and context dictionary.

    Args:
        error: Exception that occurred
        context: Additional context information
        command: Command during which error occurred
    """
    logger = get_logger("compact_semver.error")

    ctx = dict(getattr(error, "context", None) or {})
    if context:
        ctx.update(context)

    logger.error(
        "error_occurred",
        error_type=type(error).__name__,
        error_code=getattr(error, "error_code", None),
        error_message=getattr(error, "message", str(error)),
        command=command,
        context=ctx or None,
        timestamp=datetime.now(tz=UTC).isoformat(),
    )


@contextmanager
def log_execution_context(
    command: str,
    params: Optional[dict] = None,
) -> Generator[None, None, None]:
    """
    Context manager for logging command execution with timing.

    Usage:
        with log_execution_context("csemver encode"):
            # Command execution
            pass

    Args:
        command: Command being executed
        params: Command parameters
    """
    start_time = log_execution_start(command, params)
    status = "success"
    error_result: Optional[dict[str, Any]] = None

    try:
        yield
    except Exception as e:
        status = "error"
        error_result = {
            "error_type": type(e).__name__,
            "error_message": str(e),
        }
        log_error(e, command=command)
        raise
    finally:
        log_execution_end(command, start_time, status, error_result)
