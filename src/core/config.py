"""Runtime configuration model for Navistore.

This module owns all environment variable parsing and validation.
The storage engine consumes a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_ROOT,
    DEFAULT_DATABASE_NAME,
    DEFAULT_SCHEMA_VERSION,
    ENV_DATA_ROOT,
    ENV_DATABASE_NAME,
    ENV_SCHEMA_VERSION,
    MIN_SCHEMA_VERSION,
)
from core.errors import NavistoreConfigError


@dataclass(frozen=True)
class StorageConfig:
    """Validated storage configuration.

    Attributes:
        data_root: Directory holding the database file.
        database_name: Database file name inside data_root.
        schema_version: Schema version the store is opened with.
    """

    data_root: Path
    database_name: str
    schema_version: int

    @property
    def database_path(self) -> Path:
        """Full path of the database file."""
        return self.data_root / self.database_name

    @classmethod
    def from_env(cls) -> "StorageConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            NavistoreConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv(ENV_DATA_ROOT, str(DEFAULT_DATA_ROOT))
        database_name = validate_database_name(
            os.getenv(ENV_DATABASE_NAME, DEFAULT_DATABASE_NAME)
        )
        schema_version = _parse_schema_version(
            os.getenv(ENV_SCHEMA_VERSION, str(DEFAULT_SCHEMA_VERSION))
        )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            database_name=database_name,
            schema_version=schema_version,
        )


def validate_schema_version(schema_version: int) -> int:
    """Reject schema versions the store cannot record.

    Raises:
        NavistoreConfigError: If version is below the minimum.
    """
    if isinstance(schema_version, bool) or not isinstance(schema_version, int):
        raise NavistoreConfigError(
            f"Invalid schema version {schema_version!r}: expected an integer."
        )
    if schema_version < MIN_SCHEMA_VERSION:
        raise NavistoreConfigError(
            f"Invalid schema version {schema_version}: "
            f"must be >= {MIN_SCHEMA_VERSION}."
        )
    return schema_version


def validate_database_name(database_name: str) -> str:
    """Reject empty names and names that point outside the data root.

    Raises:
        NavistoreConfigError: If name is blank or contains a path separator.
    """
    name = database_name.strip()
    if not name:
        raise NavistoreConfigError(
            f"Invalid {ENV_DATABASE_NAME} value: database name must not be empty."
        )
    if Path(name).name != name:
        raise NavistoreConfigError(
            f"Invalid {ENV_DATABASE_NAME} value '{database_name}': "
            f"use {ENV_DATA_ROOT} to choose the directory."
        )
    return name


def _parse_schema_version(raw_value: str) -> int:
    """Parse the schema version environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed schema version.

    Raises:
        NavistoreConfigError: If value is not a positive integer.
    """
    try:
        schema_version = int(raw_value)
    except ValueError as error:
        raise NavistoreConfigError(
            f"Invalid {ENV_SCHEMA_VERSION} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {ENV_SCHEMA_VERSION} to a numeric value."
        ) from error
    return validate_schema_version(schema_version)
