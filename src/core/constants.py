"""Core constants used across Navistore modules.

This module centralizes table names, defaults, and limits.
Keeping values here avoids magic literals in storage logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".navistore")
DEFAULT_DATABASE_NAME = "navigator_cache.db"
DEFAULT_SCHEMA_VERSION = 1
MIN_SCHEMA_VERSION = 1
TABLE_CACHE = "table_cache"
TABLE_CHUNKED = "table_chunked"
COLUMN_CACHE_KEY = "cache_key"
COLUMN_CACHE_VALUE = "cache_value"
COLUMN_CHUNKED_VALUE = "chunked_value"
CACHE_KEY_SOFT_LIMIT = 100
DEFAULT_CHUNK_SIZE = 1024 * 1024
ENV_DATA_ROOT = "NAVISTORE_DATA_ROOT"
ENV_DATABASE_NAME = "NAVISTORE_DATABASE_NAME"
ENV_SCHEMA_VERSION = "NAVISTORE_SCHEMA_VERSION"
