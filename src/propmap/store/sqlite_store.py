"""
SqliteStore: SQLite-backed property store.

Provides a durable flat key/value namespace with:
- Fast indexed key lookup via SQLite
- In-memory mode via :memory:
- Open/close lifecycle and context manager support
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional

from propmap.errors import StoreError
from propmap.store.base import PropertyStore

logger = logging.getLogger(__name__)


class SqliteStore(PropertyStore):
    """SQLite-backed property store.

    Attributes:
        db_path: Path to SQLite database file, or ":memory:" for in-memory.
        conn: SQLite connection (None until open() called or context entered).

    Example:
        >>> with SqliteStore(":memory:") as store:
        ...     store.write_raw("abc", '"hello"')
        ...     text = store.read_raw("abc")
    """

    _SCHEMA_SQL = """
        CREATE TABLE IF NOT EXISTS properties (
            key TEXT PRIMARY KEY NOT NULL,
            value TEXT NOT NULL
        );
    """

    def __init__(self, db_path: str | Path) -> None:
        """Initialise SqliteStore.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for
                in-memory database (fast, non-persistent).
        """
        self.db_path = str(db_path)
        self._conn: sqlite3.Connection | None = None

    @property
    def conn(self) -> sqlite3.Connection:
        """Get the database connection, raising if not connected."""
        if self._conn is None:
            raise RuntimeError(
                "SqliteStore not connected. Use 'with store:' or call open()."
            )
        return self._conn

    @property
    def is_open(self) -> bool:
        """Check if the store connection is open."""
        return self._conn is not None

    @property
    def is_memory(self) -> bool:
        """Check if this is an in-memory database."""
        return self.db_path == ":memory:"

    def open(self) -> SqliteStore:
        """Open the database connection and initialise schema.

        Returns:
            self for method chaining.

        Raises:
            RuntimeError: If already connected.
        """
        if self._conn is not None:
            raise RuntimeError("SqliteStore already connected.")

        self._conn = sqlite3.connect(self.db_path)
        if not self.is_memory:
            self._conn.execute("PRAGMA journal_mode = WAL")

        self.conn.executescript(self._SCHEMA_SQL)
        self.conn.commit()
        logger.debug(f"Opened property store {self.db_path}")
        return self

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> SqliteStore:
        """Context manager entry - opens connection."""
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit - closes connection."""
        self.close()

    @contextmanager
    def _writing(self) -> Iterator[sqlite3.Cursor]:
        """Run a single write, committing on success.

        Rolls back and wraps sqlite and text-encoding errors as
        StoreError.
        """
        cursor = self.conn.cursor()
        try:
            yield cursor
            self.conn.commit()
        except (sqlite3.Error, UnicodeError) as e:
            self.conn.rollback()
            raise StoreError(f"SQLite write failed: {e}") from e
        finally:
            cursor.close()

    def table_exists(self, table_name: str) -> bool:
        """Check if a table exists in the database.

        Args:
            table_name: Name of the table to check.

        Returns:
            True if table exists, False otherwise.
        """
        cursor = self.conn.execute(
            "SELECT name FROM sqlite_master " "WHERE type='table' AND name=?",
            (table_name,),
        )
        return cursor.fetchone() is not None

    def key_count(self) -> int:
        """Count stored keys across all namespaces."""
        cursor = self.conn.execute("SELECT COUNT(*) FROM properties")
        row = cursor.fetchone()
        return int(row[0]) if row else 0

    # ========================================================================
    # Property store primitives
    # ========================================================================

    def enumerate_keys(self) -> Iterable[str]:
        try:
            cursor = self.conn.execute("SELECT key FROM properties")
            return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StoreError(f"SQLite key listing failed: {e}") from e

    def read_raw(self, key: str) -> Optional[str]:
        try:
            cursor = self.conn.execute(
                "SELECT value FROM properties WHERE key = ?", (key,)
            )
            row = cursor.fetchone()
        except (sqlite3.Error, UnicodeError) as e:
            raise StoreError(f"SQLite read failed: {e}") from e
        return row[0] if row else None

    def write_raw(self, key: str, value: Optional[str]) -> None:
        with self._writing() as cursor:
            if value is None:
                cursor.execute("DELETE FROM properties WHERE key = ?", (key,))
            else:
                cursor.execute(
                    "INSERT OR REPLACE INTO properties (key, value) "
                    "VALUES (?, ?)",
                    (key, value),
                )
