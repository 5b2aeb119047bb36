from typing import List

import pytest
from fastapi.testclient import TestClient

from exceptions.exceptions import StoreError
from runtime.api.server import create_app
from runtime.models.log_models import LogEntry
from runtime.store.base import LogStore
from runtime.store.in_memory_store import InMemoryLogStore
from runtime.store.sqlite_store import SqliteLogStore


def make_entry(timestamp: str, message: str, id: str = None) -> LogEntry:
    return LogEntry(id=id or f"id-{message}", timestamp=timestamp, message=message)


class StaticLogStore(LogStore):
    """Store that serves a fixed list, for exercising the query path."""

    def __init__(self, entries: List[LogEntry]):
        self.entries = list(entries)

    def append(self, message: str) -> LogEntry:
        entry = LogEntry.create(message)
        self.entries.append(entry)
        return entry

    def list(self) -> List[LogEntry]:
        return list(self.entries)

    def count(self) -> int:
        return len(self.entries)


class BrokenLogStore(LogStore):
    """Store whose backend is always unreachable."""

    def append(self, message: str) -> LogEntry:
        raise StoreError("append", ConnectionError("backend down"))

    def list(self) -> List[LogEntry]:
        raise StoreError("list", ConnectionError("backend down"))

    def count(self) -> int:
        raise StoreError("count", ConnectionError("backend down"))


@pytest.fixture
def memory_store():
    return InMemoryLogStore()


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteLogStore(f"sqlite:///{tmp_path / 'logs.db'}")


@pytest.fixture
def api_client(memory_store):
    return TestClient(create_app(memory_store))
