"""LogStore: the contract shared by every log storage backend.

A store only knows how to add a message and hand back what it holds.
Filtering, sorting and pagination happen afterwards in
`runtime.query.log_query`, so backends stay interchangeable:

    entries = store.list()
    page = apply_query(entries, query)

Concrete variants:
- InMemoryLogStore: process-local, lost on restart
- SqliteLogStore: durable, backed by a single `logs` table
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.log_models import LogEntry


class LogStore(ABC):
    """Append-only storage for LogEntry values.

    Every method raises `exceptions.exceptions.StoreError` when the backend
    cannot complete the operation.
    """

    @abstractmethod
    def append(self, message: str) -> LogEntry:
        """Create a new entry for `message`, persist it and return it.

        The store assigns the id and timestamp. Existing entries are never
        modified.
        """

    @abstractmethod
    def list(self) -> List[LogEntry]:
        """Return every entry currently held.

        Order is backend-specific and must not be relied on.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of entries currently held."""
