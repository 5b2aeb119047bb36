"""
FastAPI application entry point for the Chad Log runtime.

Responsibilities:
- configure logging from settings
- construct the shared LogStore (in-memory or SQLite, chosen once here)
- include the log routes

Start it with:

    uvicorn runtime.api.server:app --reload

or `chad-log serve`.
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from configs.settings import settings
from runtime.store.base import LogStore
from runtime.store.factory import create_log_store
from . import log_routes


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


class AsciiJSONResponse(JSONResponse):
    """JSONResponse that escapes non-ASCII, so echoed lone surrogates still encode."""

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("ascii")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> AsciiJSONResponse:
    # Same body as FastAPI's default 422, but the rejected input is echoed
    # back and may not be encodable as UTF-8.
    return AsciiJSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(log_store: LogStore) -> FastAPI:
    """Build the FastAPI app around an already-constructed store."""
    app = FastAPI(title="Chad Log API")

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Initialize the router module with the shared store, then include it.
    log_routes.init_routes(log_store=log_store)
    app.include_router(log_routes.router)
    return app


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# Log storage: SQLite when CHAD_LOG_DATABASE_URL is set, in-memory otherwise.
log_store = create_log_store(
    settings.database_url,
    timeout=settings.store_timeout,
)

app = create_app(log_store)
