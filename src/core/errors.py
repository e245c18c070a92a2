"""Navistore exception hierarchy.

Storage operations never raise to their callers; these errors cover
configuration and helper misuse, which should fail loudly.
"""

from __future__ import annotations


class NavistoreError(Exception):
    """Base exception for all Navistore failures."""


class NavistoreConfigError(NavistoreError):
    """Raised for invalid storage configuration."""


class NavistoreStoreError(NavistoreError):
    """Raised for invalid arguments to storage helpers."""
