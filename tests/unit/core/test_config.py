"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import StorageConfig, validate_database_name, validate_schema_version
from core.errors import NavistoreConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root from environment."""
    monkeypatch.setenv("NAVISTORE_DATA_ROOT", "./.tmp-navistore")

    config = StorageConfig.from_env()

    assert config.data_root.name == ".tmp-navistore"


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to the default name and version."""
    monkeypatch.delenv("NAVISTORE_DATABASE_NAME", raising=False)
    monkeypatch.delenv("NAVISTORE_SCHEMA_VERSION", raising=False)

    config = StorageConfig.from_env()

    assert (config.database_name, config.schema_version) == ("navigator_cache.db", 1)


def test_database_path_joins_root_and_name(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Database path should live directly under the data root."""
    monkeypatch.setenv("NAVISTORE_DATA_ROOT", str(tmp_path))
    monkeypatch.setenv("NAVISTORE_DATABASE_NAME", "routes.db")

    config = StorageConfig.from_env()

    assert config.database_path == tmp_path.resolve() / "routes.db"


def test_from_env_raises_for_invalid_version(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric schema version."""
    monkeypatch.setenv("NAVISTORE_SCHEMA_VERSION", "not-a-number")

    with pytest.raises(NavistoreConfigError):
        StorageConfig.from_env()


def test_from_env_raises_for_zero_version(monkeypatch: pytest.MonkeyPatch) -> None:
    """Version 0 is reserved for a database that has no schema yet."""
    monkeypatch.setenv("NAVISTORE_SCHEMA_VERSION", "0")

    with pytest.raises(NavistoreConfigError):
        StorageConfig.from_env()


def test_validate_schema_version_rejects_bool() -> None:
    """Booleans should not pass as integer versions."""
    with pytest.raises(NavistoreConfigError):
        validate_schema_version(True)


def test_validate_database_name_rejects_paths() -> None:
    """Database names should not smuggle in a directory."""
    with pytest.raises(NavistoreConfigError):
        validate_database_name("../elsewhere.db")


def test_validate_database_name_rejects_blank() -> None:
    """Blank database names should fail loudly."""
    with pytest.raises(NavistoreConfigError):
        validate_database_name("   ")
