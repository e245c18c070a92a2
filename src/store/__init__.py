"""Storage layer.

This package persists opaque cache values and one ordered chunk set
in an embedded SQLite database owned by the storage engine.
"""
