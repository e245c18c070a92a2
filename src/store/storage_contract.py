"""Storage contract consumed by the rest of the application.

Callers depend on this protocol rather than on the SQLite engine,
so an in-memory implementation can stand in during tests.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class Storage(Protocol):
    """Payload-agnostic byte cache plus a single ordered chunk set.

    No operation raises; faults degrade to the default or empty result.
    """

    def has_data(self, key: str, default_value: bool = False) -> bool:
        """Return whether an entry exists for key."""

    def get_data(self, key: str, default_value: bytes | None = None) -> bytes | None:
        """Return the stored value for key, or default_value on a miss."""

    def save_data(self, key: str, value: bytes | None) -> bool:
        """Insert or replace the value for key."""

    def save_chunked_data(self, chunks: Sequence[bytes | None]) -> bool:
        """Replace the whole chunk set with chunks, in order."""

    def get_chunked_data(self) -> list[bytes | None]:
        """Return every chunk in insertion order."""

    def invalidate(self) -> None:
        """Release held resources."""
