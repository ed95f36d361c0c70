# -*- coding: utf-8 -*-
"""
Portions tracker API.

Daily nutrient portions and per-nutrient goals, both derived from append-only
event ledgers.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .db import get_store
from .errors import InvalidRequest, StoreFailure
from .goals.api import router as goals_router
from .nutrients.api import router as nutrients_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portions tracker",
    description="Event-sourced daily nutrient portions and goals",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_open_store() -> None:
    get_store()


@app.middleware("http")
async def _trace_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(InvalidRequest)
async def _invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.reason)
    return JSONResponse(status_code=400, content={"detail": f"Something went wrong: {exc}"})


@app.exception_handler(StoreFailure)
async def _store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
    # Traceback was already logged inside the store gate.
    return JSONResponse(status_code=500, content={"detail": f"Something went wrong: {exc}"})


# queries and commands
app.include_router(nutrients_router)
app.include_router(goals_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    configure_logging()
    logger.info("Starting server at %s...", settings.bind_address)
    uvicorn.run(app, host=settings.bind_host, port=settings.bind_port, log_level=settings.log_level.lower())
