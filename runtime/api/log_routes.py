"""HTTP routes for the Chad Log runtime.

Exposes endpoints like:

- GET  /            -> plain-text greeting
- GET  /ping        -> a LogEntry-shaped liveness response (not stored)
- POST /logs        -> takes {message} and returns the stored LogEntry
- GET  /logs        -> lists entries, filtered / sorted / paginated by
                       the after, contains, limit and offset parameters
- GET  /logs/count  -> returns {count}
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from exceptions.exceptions import StoreError

from ..models.api_models import CountResponse, CreateLogRequest, PingResponse
from ..models.log_models import DEFAULT_LIMIT, LogEntry, LogQuery, new_log_id, utc_timestamp
from ..query.log_query import apply_query
from ..store.base import LogStore


logger = logging.getLogger(__name__)

# Router for all log-related endpoints
router = APIRouter()


# Module-level reference, to be initialized by the server.
_LOG_STORE: Optional[LogStore] = None


def init_routes(log_store: LogStore) -> None:
    """Initialize the module-level store used by the route handlers."""
    global _LOG_STORE
    _LOG_STORE = log_store


def _require_log_store() -> LogStore:
    if _LOG_STORE is None:
        raise HTTPException(
            status_code=500,
            detail="LogStore is not configured on the server.",
        )
    return _LOG_STORE


def _store_unavailable(e: StoreError) -> HTTPException:
    # A backend failure must never look like an empty result.
    logger.warning("[LOGS] Store failure during %s: %s", e.operation, e.cause)
    return HTTPException(status_code=503, detail="Log store unavailable")


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Hello from Chad Log API!"


@router.get("/ping", response_model=PingResponse)
def ping() -> PingResponse:
    return PingResponse(
        id=new_log_id(),
        timestamp=utc_timestamp(),
        message="Ping response from server!",
    )


@router.post("/logs", response_model=LogEntry, status_code=201)
def create_log(request: CreateLogRequest) -> LogEntry:
    """Store a new log message.

    The store assigns id and timestamp; the client only supplies the text.
    """
    store = _require_log_store()
    try:
        entry = store.append(request.message)
    except StoreError as e:
        raise _store_unavailable(e)
    logger.debug("[LOGS] Stored entry id=%s", entry.id)
    return entry


@router.get("/logs", response_model=List[LogEntry])
def list_logs(
    after: Optional[str] = None,
    contains: Optional[str] = None,
    limit: int = Query(default=DEFAULT_LIMIT, ge=0),
    offset: int = Query(default=0, ge=0),
) -> List[LogEntry]:
    """List stored entries.

    `after` is lenient: a value that is not a valid RFC 3339 timestamp is
    ignored rather than rejected, so the request still returns the
    (sorted, paginated) unfiltered set.
    """
    store = _require_log_store()
    query = LogQuery(after=after, contains=contains, limit=limit, offset=offset)
    try:
        entries = store.list()
    except StoreError as e:
        raise _store_unavailable(e)
    return apply_query(entries, query)


@router.get("/logs/count", response_model=CountResponse)
def count_logs() -> CountResponse:
    store = _require_log_store()
    try:
        total = store.count()
    except StoreError as e:
        raise _store_unavailable(e)
    return CountResponse(count=total)
