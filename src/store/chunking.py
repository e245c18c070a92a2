"""Chunked payload helpers.

Large payloads such as a serialized route are checkpointed through the
chunk region as consecutive slices and reassembled on restore.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import DEFAULT_CHUNK_SIZE
from core.errors import NavistoreStoreError
from store.storage_contract import Storage


def split_payload(payload: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[bytes]:
    """Split payload into consecutive slices.

    Args:
        payload: Bytes to split.
        chunk_size: Maximum slice length in bytes.

    Returns:
        Ordered slices; empty for an empty payload.

    Raises:
        NavistoreStoreError: If chunk_size is not positive.
    """
    if chunk_size < 1:
        raise NavistoreStoreError(
            f"Invalid chunk size {chunk_size}: expected a positive byte count."
        )
    data = bytes(payload)
    return [data[offset : offset + chunk_size] for offset in range(0, len(data), chunk_size)]


def join_chunks(chunks: Iterable[bytes | None]) -> bytes:
    """Concatenate chunks in order; None chunks count as empty."""
    return b"".join(chunk for chunk in chunks if chunk is not None)


def save_payload(
    storage: Storage,
    payload: bytes,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bool:
    """Checkpoint payload into the chunk region, replacing what was there."""
    return storage.save_chunked_data(split_payload(payload, chunk_size))


def load_payload(storage: Storage) -> bytes | None:
    """Restore the checkpointed payload, or None when none is stored."""
    chunks = storage.get_chunked_data()
    if not chunks:
        return None
    return join_chunks(chunks)
