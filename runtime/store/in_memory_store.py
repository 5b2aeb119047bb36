"""In-memory log store.

Entries live in a plain list owned by the store instance and disappear when
the process exits. This is the default backend when no database URL is
configured (see `runtime.store.factory`).
"""

from typing import List

from ..models.log_models import LogEntry
from .base import LogStore
from .rwlock import ReadWriteLock


class InMemoryLogStore(LogStore):
    """Process-local, append-only list of LogEntry values.

    Writers are serialized through a ReadWriteLock; readers share it.
    `list` returns a copy, so an already-returned snapshot never changes
    when later entries are appended.
    """

    def __init__(self) -> None:
        self._logs: List[LogEntry] = []
        self._lock = ReadWriteLock()

    def append(self, message: str) -> LogEntry:
        with self._lock.write_locked():
            # Created under the lock so timestamps follow insertion order.
            entry = LogEntry.create(message)
            # Never step backwards if the wall clock does.
            if self._logs and entry.timestamp < self._logs[-1].timestamp:
                entry = entry.model_copy(update={"timestamp": self._logs[-1].timestamp})
            self._logs.append(entry)
        return entry

    def list(self) -> List[LogEntry]:
        with self._lock.read_locked():
            return list(self._logs)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._logs)
