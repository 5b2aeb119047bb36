"""
Filtering, sorting and pagination of listed log entries.

The engine works on whatever `LogStore.list()` returned and never talks to
a store itself. Steps are applied in a fixed order:

1) after     - keep entries strictly newer than `after` (if it parses)
2) contains  - keep entries whose message contains the literal substring
3) sort      - stable, ascending by timestamp text
4) paginate  - skip `offset`, take at most `limit`

Nothing here raises: a malformed `after` simply disables that filter, and
an offset past the end gives an empty page.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from ..models.log_models import LogEntry, LogQuery


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """Parse RFC 3339 text into an aware datetime, or return None.

    Timestamps without an explicit offset are treated as unparseable.
    """
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed


def matches_after(entry: LogEntry, after: datetime) -> bool:
    """True if the entry's timestamp parses and is strictly later than `after`."""
    entry_time = parse_timestamp(entry.timestamp)
    if entry_time is None:
        return False
    return entry_time > after


def apply_query(entries: Iterable[LogEntry], query: LogQuery) -> List[LogEntry]:
    """Return the page of `entries` selected by `query`."""
    results = list(entries)

    after = parse_timestamp(query.after)
    if after is not None:
        results = [e for e in results if matches_after(e, after)]

    if query.contains is not None:
        results = [e for e in results if query.contains in e.message]

    # sorted() is stable: equal timestamps keep their listed order.
    results = sorted(results, key=lambda e: e.timestamp)

    start = query.offset
    return results[start:start + query.limit]
