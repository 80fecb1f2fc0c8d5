"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    level: int = logging.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
) -> None:
    """Configure structured logging for the loader.

    Sets up structlog with JSON output format and standard processors
    for timestamps, log levels, and context binding.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: current stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_format:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(sort_keys=True),
            ]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output or sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=output or sys.stderr,
        level=level,
    )


def configure_debug_logging(debug: bool, json_format: bool = True) -> None:
    """Configure logging from a debug flag.

    Debug sessions see every loader diagnostic, other sessions only
    warnings and errors.

    Args:
        debug: Whether debug diagnostics are enabled.
        json_format: Whether to use JSON format.
    """
    level = logging.DEBUG if debug else logging.WARNING
    configure_logging(level=level, json_format=json_format)


def bind_session_context(session_id: str) -> None:
    """Bind loader session context to all subsequent log messages.

    Args:
        session_id: Unique session identifier.
    """
    structlog.contextvars.bind_contextvars(session_id=session_id)

