"""Navistore CLI entry points.

This module exposes maintenance commands for a local cache database.
Every command goes through the storage contract, never raw SQL.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import StorageConfig, validate_database_name, validate_schema_version
from core.constants import DEFAULT_CHUNK_SIZE
from store.chunking import load_payload, split_payload
from store.database_storage import DatabaseStorage


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="navistore", description="Navistore cache CLI")
    parser.add_argument("--data-root", help="Override NAVISTORE_DATA_ROOT for this command")
    parser.add_argument(
        "--database-name",
        help="Override NAVISTORE_DATABASE_NAME for this command",
    )
    parser.add_argument(
        "--schema-version",
        type=int,
        help="Override NAVISTORE_SCHEMA_VERSION; a different version resets the store",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_has_command(subparsers)
    _add_get_command(subparsers)
    _add_put_command(subparsers)
    _add_checkpoint_command(subparsers)
    _add_restore_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Navistore CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args)
    with DatabaseStorage.from_config(config) as storage:
        if args.command == "has":
            return _run_has_command(storage, args)
        if args.command == "get":
            return _run_get_command(storage, args)
        if args.command == "put":
            return _run_put_command(storage, args)
        if args.command == "checkpoint":
            return _run_checkpoint_command(storage, args)
        if args.command == "restore":
            return _run_restore_command(storage, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> StorageConfig:
    """Build storage config with optional CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated storage config.
    """
    config = StorageConfig.from_env()
    if args.data_root:
        config = replace(config, data_root=Path(args.data_root).expanduser().resolve())
    if args.database_name:
        config = replace(config, database_name=validate_database_name(args.database_name))
    if args.schema_version is not None:
        config = replace(config, schema_version=validate_schema_version(args.schema_version))
    return config


def _run_has_command(storage: DatabaseStorage, args: argparse.Namespace) -> int:
    """Handle has command.

    Args:
        storage: Open storage engine.
        args: Parsed CLI args.

    Returns:
        Exit code; always 0.
    """
    print("true" if storage.has_data(args.key, False) else "false")
    return 0


def _run_get_command(storage: DatabaseStorage, args: argparse.Namespace) -> int:
    """Handle get command.

    Args:
        storage: Open storage engine.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when the key is missing.
    """
    if not storage.has_data(args.key, False):
        return 1
    value = storage.get_data(args.key, None) or b""
    if args.output:
        Path(args.output).write_bytes(value)
    else:
        print(value.hex())
    return 0


def _run_put_command(storage: DatabaseStorage, args: argparse.Namespace) -> int:
    """Handle put command.

    Args:
        storage: Open storage engine.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when the write failed.
    """
    payload = Path(args.file).read_bytes()
    return 0 if storage.save_data(args.key, payload) else 1


def _run_checkpoint_command(storage: DatabaseStorage, args: argparse.Namespace) -> int:
    """Handle checkpoint command.

    Args:
        storage: Open storage engine.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when the write failed.
    """
    chunks = split_payload(Path(args.file).read_bytes(), args.chunk_size)
    if not storage.save_chunked_data(chunks):
        return 1
    print(len(chunks))
    return 0


def _run_restore_command(storage: DatabaseStorage, args: argparse.Namespace) -> int:
    """Handle restore command.

    Args:
        storage: Open storage engine.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when no checkpoint is stored.
    """
    payload = load_payload(storage)
    if payload is None:
        return 1
    if args.output:
        Path(args.output).write_bytes(payload)
    else:
        print(payload.hex())
    return 0


def _add_has_command(subparsers: Any) -> None:
    has_parser = subparsers.add_parser("has", help="Report whether a key is cached")
    has_parser.add_argument("key", help="Cache key")


def _add_get_command(subparsers: Any) -> None:
    get_parser = subparsers.add_parser("get", help="Read a cached value")
    get_parser.add_argument("key", help="Cache key")
    get_parser.add_argument("--output", help="Write the value here instead of printing hex")


def _add_put_command(subparsers: Any) -> None:
    put_parser = subparsers.add_parser("put", help="Cache a file's bytes under a key")
    put_parser.add_argument("key", help="Cache key")
    put_parser.add_argument("file", help="File whose bytes are stored")


def _add_checkpoint_command(subparsers: Any) -> None:
    checkpoint_parser = subparsers.add_parser(
        "checkpoint",
        help="Replace the chunk set with a file split into chunks",
    )
    checkpoint_parser.add_argument("file", help="File to checkpoint")
    checkpoint_parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Maximum chunk size in bytes",
    )


def _add_restore_command(subparsers: Any) -> None:
    restore_parser = subparsers.add_parser("restore", help="Join the chunk set back into bytes")
    restore_parser.add_argument("--output", help="Write the payload here instead of printing hex")
