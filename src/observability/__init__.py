"""Observability module for logging."""

from src.observability.logging import (
    bind_session_context,
    configure_debug_logging,
    configure_logging,
)


__all__ = [
    "bind_session_context",
    "configure_debug_logging",
    "configure_logging",
]
