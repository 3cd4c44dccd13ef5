"""
SQLite database integration and simple migration system.

``Database`` hands out connections for a configured location and
applies schema migrations (``init_db``).  A file-backed database opens
a fresh connection for every unit of work.  The special location
``:memory:`` keeps a single shared connection for the lifetime of the
``Database`` object, since every new ``:memory:`` connection would
otherwise see its own empty database.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

MEMORY_URL = ":memory:"

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS weather_forecasts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            date TEXT NOT NULL,
            temperature_c INTEGER NOT NULL,
            summary TEXT
        );
        """,
    ),
]


class Database:
    """Connection factory for a single SQLite database."""

    def __init__(self, url: str) -> None:
        self.url = url
        self._shared: Optional[sqlite3.Connection] = None

    @property
    def in_memory(self) -> bool:
        return self.url == MEMORY_URL

    def get_database_path(self) -> str:
        """Resolve the database location.

        Absolute paths are used as is; relative paths are resolved
        against the project root.
        """
        if self.in_memory or os.path.isabs(self.url):
            return self.url
        return str((PROJECT_ROOT / self.url).resolve())

    def get_connection(self) -> sqlite3.Connection:
        """Return a connection whose rows are ``sqlite3.Row`` objects."""
        if self.in_memory:
            if self._shared is None:
                self._shared = self._open(MEMORY_URL)
            return self._shared
        path = self.get_database_path()
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        return self._open(path)

    @staticmethod
    def _open(target: str) -> sqlite3.Connection:
        # Requests may be served on a different thread than the one that
        # opened the shared in-memory connection.
        conn = sqlite3.connect(target, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, committing on success and rolling back on error."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            if conn is not self._shared:
                conn.close()

    def init_db(self) -> List[int]:
        """Apply pending migrations and return the versions applied."""
        applied: List[int] = []
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    current_version = version
                    applied.append(version)
        if applied:
            logger.info("Applied migrations %s to %s", applied, self.get_database_path())
        return applied

    def close(self) -> None:
        """Close the shared in-memory connection, discarding its data."""
        if self._shared is not None:
            self._shared.close()
            self._shared = None
