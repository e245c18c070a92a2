"""Structured logging configuration.

This module initializes structlog with a stable JSON format and
provides the fault logger the storage engine reports faults to.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured JSON output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


class FaultLogger(Protocol):
    """Side channel for storage faults that are not surfaced to callers.

    Implementations must not raise.
    """

    def error(self, fault: BaseException) -> None:
        """Record one swallowed fault."""


class StructlogFaultLogger:
    """Fault logger that writes a ``storage_fault`` structlog event."""

    def __init__(self, name: str = "navistore.faults") -> None:
        self._logger = get_logger(name)

    def error(self, fault: BaseException) -> None:
        """Log the fault type and message at error level."""
        self._logger.error(
            "storage_fault",
            error_type=type(fault).__name__,
            error=str(fault),
        )
