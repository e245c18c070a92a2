"""Argument checks shared by storage implementations.

Both storage implementations raise these errors inside their operation
boundaries, where the errors are reported and degraded.
"""

from __future__ import annotations


def check_key(key: str) -> None:
    """Raise TypeError unless key is a str."""
    if not isinstance(key, str):
        raise TypeError(f"Cache key must be str, got {type(key).__name__}")


def to_blob(value: bytes | None) -> bytes | None:
    """Normalize a payload to immutable bytes.

    Args:
        value: Bytes-like payload or None.

    Returns:
        A bytes copy, or None.

    Raises:
        TypeError: If value is neither bytes-like nor None.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Stored values must be bytes or None, got {type(value).__name__}")
