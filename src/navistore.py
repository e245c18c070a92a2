"""Public SDK surface for Navistore.

This module provides a stable import path for application code.
It re-exports the storage engine, its contract, and helpers.
"""

from __future__ import annotations

from core.config import StorageConfig
from core.errors import NavistoreConfigError, NavistoreError, NavistoreStoreError
from core.logging_config import FaultLogger, StructlogFaultLogger
from store.chunking import join_chunks, load_payload, save_payload, split_payload
from store.database_storage import DatabaseStorage
from store.memory_storage import InMemoryStorage
from store.schema import SchemaTransition
from store.storage_contract import Storage

__all__ = [
    "DatabaseStorage",
    "FaultLogger",
    "InMemoryStorage",
    "NavistoreConfigError",
    "NavistoreError",
    "NavistoreStoreError",
    "SchemaTransition",
    "Storage",
    "StorageConfig",
    "StructlogFaultLogger",
    "join_chunks",
    "load_payload",
    "save_payload",
    "split_payload",
]
