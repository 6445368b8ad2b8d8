"""Expose storage client wrappers."""

from .sqlite_store import SQLiteKeyValueStore

__all__ = ["SQLiteKeyValueStore"]
