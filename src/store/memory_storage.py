"""Dict-backed storage for tests of code that consumes the storage contract."""

from __future__ import annotations

from typing import Sequence

from core.logging_config import FaultLogger, StructlogFaultLogger
from store.blob_values import check_key, to_blob


class InMemoryStorage:
    """Process-local storage with the same semantics as DatabaseStorage.

    Data survives ``invalidate()``; nothing survives the process. Invalid
    keys or values are reported to the fault logger and degrade like the
    SQLite engine does.
    """

    def __init__(self, fault_logger: FaultLogger | None = None) -> None:
        self._entries: dict[str, bytes | None] = {}
        self._chunks: list[bytes | None] = []
        self._fault_logger = fault_logger or StructlogFaultLogger()

    def has_data(self, key: str, default_value: bool = False) -> bool:
        """Return whether an entry exists for key, or default_value for a bad key."""
        try:
            check_key(key)
        except TypeError as error:
            self._fault_logger.error(error)
            return default_value
        return key in self._entries

    def get_data(self, key: str, default_value: bytes | None = None) -> bytes | None:
        """Return the stored value, or default_value on a miss or a bad key."""
        try:
            check_key(key)
        except TypeError as error:
            self._fault_logger.error(error)
            return default_value
        return self._entries.get(key, default_value)

    def save_data(self, key: str, value: bytes | None) -> bool:
        """Insert or replace the value for key; False for a bad key or value."""
        try:
            check_key(key)
            blob = to_blob(value)
        except TypeError as error:
            self._fault_logger.error(error)
            return False
        self._entries[key] = blob
        return True

    def save_chunked_data(self, chunks: Sequence[bytes | None]) -> bool:
        """Replace the chunk set; a bad chunk leaves the previous set in place."""
        try:
            new_chunks = [to_blob(chunk) for chunk in chunks]
        except TypeError as error:
            self._fault_logger.error(error)
            return False
        self._chunks = new_chunks
        return True

    def get_chunked_data(self) -> list[bytes | None]:
        """Return a copy of the chunk set in insertion order."""
        return list(self._chunks)

    def invalidate(self) -> None:
        """Nothing to release for an in-memory store."""
        return None
