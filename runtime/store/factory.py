"""Pick the log store backend once, at startup."""

import logging
from typing import Optional

from .base import LogStore
from .in_memory_store import InMemoryLogStore
from .sqlite_store import DEFAULT_TIMEOUT, SqliteLogStore


logger = logging.getLogger(__name__)


def create_log_store(database_url: Optional[str], timeout: float = DEFAULT_TIMEOUT) -> LogStore:
    """Return a SqliteLogStore if a database URL is given, else an InMemoryLogStore."""
    if database_url:
        logger.info("[STORE] Using SQLite log store (%s)", database_url)
        return SqliteLogStore(database_url, timeout=timeout)

    logger.info("[STORE] No database URL configured; using in-memory log store")
    return InMemoryLogStore()
