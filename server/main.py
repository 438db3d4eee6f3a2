"""FastAPI application — lookup endpoints."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("mimeref.server")

from mimeref.commands import record_to_dict
from server import state
from server.models import MimeRecord, StatsResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    state.init_resolver()
    resolver = state.get_resolver()
    logger.info(
        "resolver ready: %d types, %d extensions",
        len(resolver.db.by_type), len(resolver.db.by_extension),
    )
    yield


app = FastAPI(title="mimeref", version="0.1.0", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.monotonic()
    response = await call_next(request)
    elapsed = time.monotonic() - start
    if elapsed > 1.0:
        logger.warning(
            "%s %s %d — %.1fs", request.method, request.url.path, response.status_code, elapsed
        )
    return response


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


@app.get("/type", response_model=MimeRecord, response_model_exclude_none=True)
def lookup_type(q: str = Query(..., description="MIME type, parameters allowed")):
    return record_to_dict(state.get_resolver().type(q))


@app.get("/path", response_model=MimeRecord, response_model_exclude_none=True)
def lookup_path(q: str = Query(..., description="File path or name")):
    return record_to_dict(state.get_resolver().path(q))


@app.get("/stats", response_model=StatsResponse)
def stats():
    db = state.get_resolver().db
    return StatsResponse(
        types=len(db.by_type),
        extensions=len(db.by_extension),
        max_ext_length=db.max_ext_length,
    )
