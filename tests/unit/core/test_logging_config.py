"""Unit tests for logging and the default fault logger."""

from __future__ import annotations

from core.logging_config import StructlogFaultLogger, get_logger


def test_get_logger_accepts_structured_fields() -> None:
    """Loggers should take an event name plus keyword fields."""
    logger = get_logger(__name__)

    logger.info("test_event", key="value")

    assert hasattr(logger, "error")


def test_fault_logger_reports_without_raising() -> None:
    """Reporting a fault should return normally."""
    fault_logger = StructlogFaultLogger()

    result = fault_logger.error(OSError("disk I/O error"))

    assert result is None
