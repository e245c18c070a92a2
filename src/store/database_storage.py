"""SQLite-backed storage engine.

This module implements the cache region and the chunk region on top of
one lazily opened SQLite connection. Every operation catches faults at
its own boundary, reports them to the fault logger, and degrades to a
default so a broken cache never takes the application down.
"""

from __future__ import annotations

from contextlib import closing
from pathlib import Path
import sqlite3
import threading
from typing import Sequence

from core.config import StorageConfig, validate_schema_version
from core.constants import (
    CACHE_KEY_SOFT_LIMIT,
    COLUMN_CACHE_KEY,
    COLUMN_CACHE_VALUE,
    COLUMN_CHUNKED_VALUE,
    TABLE_CACHE,
    TABLE_CHUNKED,
)
from core.logging_config import FaultLogger, StructlogFaultLogger, get_logger
from store.blob_values import check_key, to_blob
from store.schema import SchemaTransition, apply_schema, read_schema_version, transaction

_LOGGER = get_logger(__name__)

_SELECT_CACHE_SQL = (
    f"SELECT {COLUMN_CACHE_VALUE} FROM {TABLE_CACHE} WHERE {COLUMN_CACHE_KEY} = ?"
)
_UPSERT_CACHE_SQL = (
    f"INSERT OR REPLACE INTO {TABLE_CACHE} "
    f"({COLUMN_CACHE_KEY}, {COLUMN_CACHE_VALUE}) VALUES (?, ?)"
)
_DELETE_CHUNKS_SQL = f"DELETE FROM {TABLE_CHUNKED}"
_INSERT_CHUNK_SQL = f"INSERT INTO {TABLE_CHUNKED} ({COLUMN_CHUNKED_VALUE}) VALUES (?)"
_SELECT_CHUNKS_SQL = f"SELECT {COLUMN_CHUNKED_VALUE} FROM {TABLE_CHUNKED} ORDER BY rowid"


class DatabaseStorage:
    """Embedded cache and chunk store.

    The connection is opened on first use and reused until
    ``invalidate()``; the next call after that reopens it. All
    operations are serialized behind one re-entrant lock.
    """

    def __init__(
        self,
        database_path: Path | str,
        schema_version: int,
        fault_logger: FaultLogger | None = None,
    ) -> None:
        """Initialize the engine without touching the disk.

        Args:
            database_path: SQLite database file location.
            schema_version: Version to open the schema at.
            fault_logger: Receiver for swallowed faults.

        Raises:
            NavistoreConfigError: If schema_version is invalid.
        """
        self._database_path = Path(database_path)
        self._schema_version = validate_schema_version(schema_version)
        self._fault_logger = fault_logger or StructlogFaultLogger()
        self._lock = threading.RLock()
        self._connection: sqlite3.Connection | None = None

    @classmethod
    def from_config(
        cls,
        config: StorageConfig,
        fault_logger: FaultLogger | None = None,
    ) -> "DatabaseStorage":
        """Build an engine from validated config."""
        return cls(config.database_path, config.schema_version, fault_logger)

    @property
    def database_path(self) -> Path:
        return self._database_path

    @property
    def schema_version(self) -> int:
        return self._schema_version

    def has_data(self, key: str, default_value: bool = False) -> bool:
        """Return whether an entry exists for key.

        Args:
            key: Cache key.
            default_value: Returned when the lookup faults.

        Returns:
            True when a row exists, even if its value is None.
        """
        with self._lock:
            try:
                return self._fetch_cache_row(key) is not None
            except Exception as error:
                self._fault_logger.error(error)
                return default_value

    def get_data(self, key: str, default_value: bytes | None = None) -> bytes | None:
        """Return the stored value for key.

        Args:
            key: Cache key.
            default_value: Returned when no row exists or the lookup faults.

        Returns:
            Stored bytes, None for a row saved with None, else default_value.
        """
        with self._lock:
            try:
                row = self._fetch_cache_row(key)
            except Exception as error:
                self._fault_logger.error(error)
                return default_value
        if row is None:
            return default_value
        return row[0]

    def save_data(self, key: str, value: bytes | None) -> bool:
        """Insert or replace the value stored under key.

        Args:
            key: Cache key.
            value: Opaque payload; None is stored as SQL NULL.

        Returns:
            Whether the write succeeded.
        """
        with self._lock:
            try:
                check_key(key)
                if len(key) > CACHE_KEY_SOFT_LIMIT:
                    _LOGGER.warning(
                        "cache_key_exceeds_soft_limit",
                        key_length=len(key),
                        soft_limit=CACHE_KEY_SOFT_LIMIT,
                    )
                blob = to_blob(value)
                with closing(self._open().cursor()) as cursor:
                    cursor.execute(_UPSERT_CACHE_SQL, (key, blob))
                return True
            except Exception as error:
                self._fault_logger.error(error)
                return False

    def save_chunked_data(self, chunks: Sequence[bytes | None]) -> bool:
        """Replace the chunk set with chunks, preserving their order.

        Delete and insert run in one transaction, so a failure leaves the
        previous chunk set in place.

        Args:
            chunks: Ordered chunk payloads; None entries are stored as NULL.

        Returns:
            Whether the write succeeded.
        """
        with self._lock:
            try:
                rows = [(to_blob(chunk),) for chunk in chunks]
                connection = self._open()
                with transaction(connection):
                    connection.execute(_DELETE_CHUNKS_SQL)
                    connection.executemany(_INSERT_CHUNK_SQL, rows)
                return True
            except Exception as error:
                self._fault_logger.error(error)
                return False

    def get_chunked_data(self) -> list[bytes | None]:
        """Return every chunk in insertion order, or [] on a fault."""
        with self._lock:
            try:
                with closing(self._open().cursor()) as cursor:
                    cursor.execute(_SELECT_CHUNKS_SQL)
                    return [row[0] for row in cursor.fetchall()]
            except Exception as error:
                self._fault_logger.error(error)
                return []

    def invalidate(self) -> None:
        """Close the connection if open. Safe to call repeatedly."""
        with self._lock:
            connection = self._connection
            self._connection = None
            if connection is None:
                return
            try:
                connection.close()
            except Exception as error:
                self._fault_logger.error(error)
                return
            _LOGGER.info("storage_closed", database_path=str(self._database_path))

    def __enter__(self) -> "DatabaseStorage":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.invalidate()

    def _fetch_cache_row(self, key: str) -> tuple[bytes | None] | None:
        check_key(key)
        with closing(self._open().cursor()) as cursor:
            cursor.execute(_SELECT_CACHE_SQL, (key,))
            return cursor.fetchone()

    def _open(self) -> sqlite3.Connection:
        """Return the shared connection, opening it and applying the schema."""
        if self._connection is not None:
            return self._connection
        self._database_path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(
            str(self._database_path),
            isolation_level=None,
            check_same_thread=False,
        )
        try:
            previous_version = read_schema_version(connection)
            transition = apply_schema(connection, self._schema_version)
        except Exception:
            connection.close()
            raise
        self._connection = connection
        _log_transition(self._database_path, previous_version, self._schema_version, transition)
        return connection


def _log_transition(
    database_path: Path,
    previous_version: int,
    schema_version: int,
    transition: SchemaTransition,
) -> None:
    if transition is SchemaTransition.CREATED:
        _LOGGER.info(
            "storage_schema_created",
            database_path=str(database_path),
            schema_version=schema_version,
        )
    elif transition is SchemaTransition.RESET:
        _LOGGER.info(
            "storage_schema_reset",
            database_path=str(database_path),
            from_version=previous_version,
            to_version=schema_version,
        )
    _LOGGER.info(
        "storage_opened",
        database_path=str(database_path),
        schema_version=schema_version,
        transition=transition.value,
    )
