"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


class RecordingFaultLogger:
    """Fault logger that keeps every reported fault for assertions."""

    def __init__(self) -> None:
        self.faults: list[BaseException] = []

    def error(self, fault: BaseException) -> None:
        self.faults.append(fault)


@pytest.fixture
def fault_logger() -> RecordingFaultLogger:
    return RecordingFaultLogger()


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "navigator_cache.db"
