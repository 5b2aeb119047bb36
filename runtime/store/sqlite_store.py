"""SqliteLogStore: durable log storage in a single SQLite table.

Schema:

    CREATE TABLE logs (
        id        TEXT PRIMARY KEY,   -- ULID, generated in Python
        timestamp TEXT NOT NULL,      -- RFC 3339 with +00:00 offset
        message   TEXT NOT NULL
    )

Accepted connection strings:

    sqlite:///logs.db            relative path
    sqlite:////var/lib/logs.db   absolute path
    /var/lib/logs.db             bare path

Ids and timestamps are created by `LogEntry.create`, not by the database,
so entries from this store have exactly the same shape as in-memory ones.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from exceptions.exceptions import StoreError

from ..models.log_models import LogEntry
from .base import LogStore


logger = logging.getLogger(__name__)

_SQLITE_SCHEME = "sqlite://"
DEFAULT_TIMEOUT = 5.0


def db_path_from_url(database_url: str) -> Path:
    """Resolve a connection string to a database file path.

    Raises
    ------
    ValueError
        If the URL uses a scheme other than sqlite, is empty, or points at
        `:memory:` (each connection would see a different empty database).
    """
    if database_url.startswith(_SQLITE_SCHEME):
        raw = database_url[len(_SQLITE_SCHEME):]
        # sqlite:///rel.db -> "/rel.db" -> "rel.db"; sqlite:////abs.db -> "//abs.db" -> "/abs.db"
        if raw.startswith("/"):
            raw = raw[1:]
    elif "://" in database_url:
        raise ValueError(f"Unsupported database URL scheme: {database_url}")
    else:
        raw = database_url

    if not raw:
        raise ValueError(f"Database URL has no path: {database_url!r}")
    if raw == ":memory:":
        raise ValueError(
            "In-memory SQLite is not supported; leave the database URL unset "
            "to use the in-memory store instead."
        )
    return Path(raw)


class SqliteLogStore(LogStore):
    """LogStore backed by a SQLite database file.

    Parameters
    ----------
    database_url:
        Connection string, see module docstring.
    timeout:
        Seconds a call may wait on a locked database before it fails with
        StoreError.
    """

    def __init__(self, database_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._db_path = db_path_from_url(database_url)
        self._timeout = timeout
        self._init_db()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _init_db(self) -> None:
        """Create the logs table if it does not exist yet."""
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError("init", e) from e

        with self._get_conn("init") as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS logs (
                    id TEXT PRIMARY KEY,
                    timestamp TEXT NOT NULL,
                    message TEXT NOT NULL
                )
                """
            )
        logger.info("[STORE] SQLite log store ready at %s", self._db_path)

    @contextmanager
    def _get_conn(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Open a connection for one operation, commit on success, always close.

        Any sqlite3.Error raised while connecting or inside the block, and any
        text that cannot be encoded for SQLite, is re-raised as StoreError.
        """
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=self._timeout)
        except sqlite3.Error as e:
            logger.warning("[STORE] %s: cannot open %s: %s", operation, self._db_path, e)
            raise StoreError(operation, e) from e

        try:
            yield conn
            conn.commit()
        except (sqlite3.Error, UnicodeEncodeError) as e:
            logger.warning("[STORE] %s failed on %s: %s", operation, self._db_path, e)
            raise StoreError(operation, e) from e
        finally:
            conn.close()

    def append(self, message: str) -> LogEntry:
        entry = LogEntry.create(message)
        with self._get_conn("append") as conn:
            conn.execute(
                "INSERT INTO logs (id, timestamp, message) VALUES (?, ?, ?)",
                (entry.id, entry.timestamp, entry.message),
            )
        return entry

    def list(self) -> List[LogEntry]:
        with self._get_conn("list") as conn:
            rows = conn.execute(
                "SELECT id, timestamp, message FROM logs ORDER BY timestamp DESC"
            ).fetchall()
        return [
            LogEntry(id=row[0], timestamp=row[1], message=row[2])
            for row in rows
        ]

    def count(self) -> int:
        with self._get_conn("count") as conn:
            (total,) = conn.execute("SELECT COUNT(*) FROM logs").fetchone()
        return int(total)
