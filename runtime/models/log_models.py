"""
Log-related models for the Chad Log runtime.

These describe:
- LogEntry: a single stored log message (id, timestamp, message)
- LogQuery: the retrieval parameters (after, contains, limit, offset)
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID


DEFAULT_LIMIT = 50


def new_log_id() -> str:
    """Return a fresh ULID as a 26-character, time-ordered string."""
    return str(ULID())


def utc_timestamp() -> str:
    """Return the current instant as RFC 3339 text with a +00:00 offset.

    Microseconds are always written so every timestamp has the same width,
    which keeps string order identical to chronological order.
    """
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class LogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: str  # RFC 3339, e.g. 2026-10-19T12:00:00.123456+00:00
    message: str

    @classmethod
    def create(cls, message: str) -> "LogEntry":
        """Build a new entry with a generated id and the current timestamp.

        Stores call this from `append`; callers never choose id or timestamp.
        """
        return cls(id=new_log_id(), timestamp=utc_timestamp(), message=message)


class LogQuery(BaseModel):
    after: Optional[str] = None
    contains: Optional[str] = None
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    offset: int = Field(default=0, ge=0)
