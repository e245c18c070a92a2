"""Schema lifecycle for the embedded cache database.

The on-disk schema version is kept in SQLite ``PRAGMA user_version``.
A version change is handled by dropping and recreating both tables;
nothing is migrated.
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
import sqlite3
from typing import Iterator

from core.constants import (
    COLUMN_CACHE_KEY,
    COLUMN_CACHE_VALUE,
    COLUMN_CHUNKED_VALUE,
    TABLE_CACHE,
    TABLE_CHUNKED,
)

CREATE_CACHE_TABLE_SQL = (
    f"CREATE TABLE IF NOT EXISTS {TABLE_CACHE} "
    f"({COLUMN_CACHE_KEY} VARCHAR(100) PRIMARY KEY UNIQUE, {COLUMN_CACHE_VALUE} BLOB)"
)
CREATE_CHUNKED_TABLE_SQL = (
    f"CREATE TABLE IF NOT EXISTS {TABLE_CHUNKED} ({COLUMN_CHUNKED_VALUE} BLOB)"
)
DROP_CACHE_TABLE_SQL = f"DROP TABLE IF EXISTS {TABLE_CACHE}"
DROP_CHUNKED_TABLE_SQL = f"DROP TABLE IF EXISTS {TABLE_CHUNKED}"


class SchemaTransition(str, Enum):
    """Outcome of opening a database at a requested schema version."""

    CREATED = "created"
    RESET = "reset"
    UNCHANGED = "unchanged"


def resolve_transition(on_disk_version: int, requested_version: int) -> SchemaTransition:
    """Decide what opening the store at ``requested_version`` does.

    Args:
        on_disk_version: Version recorded in the file; 0 for a new file.
        requested_version: Version the caller opens the store with.

    Returns:
        CREATED for a new file, UNCHANGED for a matching version,
        RESET for any other version.
    """
    if on_disk_version == 0:
        return SchemaTransition.CREATED
    if on_disk_version == requested_version:
        return SchemaTransition.UNCHANGED
    return SchemaTransition.RESET


def read_schema_version(connection: sqlite3.Connection) -> int:
    """Return the schema version recorded in the database header."""
    row = connection.execute("PRAGMA user_version").fetchone()
    return int(row[0])


def apply_schema(connection: sqlite3.Connection, requested_version: int) -> SchemaTransition:
    """Bring the database to ``requested_version``.

    Args:
        connection: Autocommit-mode connection owned by the engine.
        requested_version: Target schema version.

    Returns:
        The transition that was applied.
    """
    transition = resolve_transition(read_schema_version(connection), requested_version)
    if transition is SchemaTransition.UNCHANGED:
        return transition
    with transaction(connection):
        if transition is SchemaTransition.RESET:
            connection.execute(DROP_CHUNKED_TABLE_SQL)
            connection.execute(DROP_CACHE_TABLE_SQL)
        connection.execute(CREATE_CACHE_TABLE_SQL)
        connection.execute(CREATE_CHUNKED_TABLE_SQL)
        # PRAGMA does not accept bound parameters.
        connection.execute(f"PRAGMA user_version = {int(requested_version)}")
    return transition


@contextmanager
def transaction(connection: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run a block inside one write transaction.

    The connection must be in autocommit mode (``isolation_level=None``).
    Any exception rolls back and propagates.
    """
    connection.execute("BEGIN IMMEDIATE")
    try:
        yield connection
    except BaseException:
        connection.execute("ROLLBACK")
        raise
    connection.execute("COMMIT")
