"""Waktu API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WaktuError → flat JSON envelopes
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
    - Static files mounted AFTER API routes, so the routes take precedence

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No shared clients on app.state: the feed client is request-scoped
      (see api.dependencies)
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from waktu import __version__
from waktu.api.error_handlers import register_error_handlers
from waktu.api.routes import calendar, info, onthisday, today
from waktu.config import get_settings
from waktu.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Waktu API started (feed: {settings.feed_base_url})",
    )
    yield
    logger.info("Waktu API shutting down")


app = FastAPI(
    title="Waktu API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def include_routes(app: FastAPI) -> None:
    """Register the API routers in a fixed order."""
    app.include_router(info.router)
    app.include_router(calendar.router)
    app.include_router(onthisday.router)
    app.include_router(today.router)


def mount_static(app: FastAPI, directory: str) -> bool:
    """Serve `directory` at the root if it exists. Call after include_routes()."""
    if not os.path.isdir(directory):
        return False
    app.mount(
        "/", StaticFiles(directory=directory, html=True), name="static",
    )
    return True


register_error_handlers(app)
include_routes(app)
# Mounted last: /, /calendar, /onthisday and /today win over files with the same path
mount_static(app, settings.static_dir)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "waktu.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
