"""Unit tests for CLI command handling."""

from __future__ import annotations

from cli.main import main


def _base_args(tmp_path) -> list[str]:
    return ["--data-root", str(tmp_path), "--database-name", "cli.db"]


def test_cli_has_reports_missing_key(tmp_path, capsys) -> None:
    """has should print false for a key never stored."""
    exit_code = main(_base_args(tmp_path) + ["has", "route:last"])
    output = capsys.readouterr().out.strip()

    assert (exit_code, output) == (0, "false")


def test_cli_put_then_get_prints_hex(tmp_path, capsys) -> None:
    """get should print the hex of bytes stored by put."""
    payload_path = tmp_path / "payload.bin"
    payload_path.write_bytes(b"\x01\x02\x03\x04")
    main(_base_args(tmp_path) + ["put", "route:last", str(payload_path)])

    exit_code = main(_base_args(tmp_path) + ["get", "route:last"])
    output = capsys.readouterr().out.strip()

    assert (exit_code, output) == (0, "01020304")


def test_cli_get_missing_key_fails(tmp_path) -> None:
    """get should exit 1 when the key is not cached."""
    exit_code = main(_base_args(tmp_path) + ["get", "missing"])

    assert exit_code == 1


def test_cli_checkpoint_then_restore(tmp_path) -> None:
    """restore should rebuild the file written by checkpoint."""
    source_path = tmp_path / "route.bin"
    source_path.write_bytes(b"x" * 25)
    restored_path = tmp_path / "restored.bin"
    main(_base_args(tmp_path) + ["checkpoint", str(source_path), "--chunk-size", "10"])

    exit_code = main(_base_args(tmp_path) + ["restore", "--output", str(restored_path)])

    assert exit_code == 0 and restored_path.read_bytes() == b"x" * 25


def test_cli_schema_version_change_resets_store(tmp_path) -> None:
    """Opening with a new schema version should drop cached keys."""
    payload_path = tmp_path / "payload.bin"
    payload_path.write_bytes(b"v")
    main(_base_args(tmp_path) + ["--schema-version", "1", "put", "k", str(payload_path)])

    exit_code = main(_base_args(tmp_path) + ["--schema-version", "2", "get", "k"])

    assert exit_code == 1


def test_cli_checkpoint_prints_chunk_count(tmp_path, capsys) -> None:
    """checkpoint should print how many chunks the file was split into."""
    source_path = tmp_path / "route.bin"
    source_path.write_bytes(b"x" * 25)

    exit_code = main(_base_args(tmp_path) + ["checkpoint", str(source_path), "--chunk-size", "10"])
    output = capsys.readouterr().out.strip()

    assert (exit_code, output) == (0, "3")
