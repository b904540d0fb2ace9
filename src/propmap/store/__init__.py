"""
Property stores: flat, string-keyed, string-valued persistence.

A store exposes three primitives (enumerate, read, write-or-clear) and
is shared by every map instance built on it.
"""

from propmap.store.base import PropertyStore
from propmap.store.memory import MemoryStore
from propmap.store.sqlite_store import SqliteStore

__all__ = ["PropertyStore", "MemoryStore", "SqliteStore"]
