"""
Main entrypoint for the Event Management API.

This module assembles the FastAPI application.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app`` so it can be served directly::

    uvicorn event_management_api.app.main:app --reload

Interactive documentation is served at ``/api-docs``.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.db import DocumentStore, StoreConnectionError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DocumentStore]
        An already opened record store.  When omitted, the store is
        opened from ``settings.database_url`` at startup and closed at
        shutdown; if it cannot be opened the error is logged and
        startup is aborted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "store", None) is not None:
            yield
            return
        try:
            app.state.store = DocumentStore.connect(settings.database_url)
        except StoreConnectionError as exc:
            logger.error("Record store connection error: %s", exc)
            raise
        logger.info("Connected to record store at %s", settings.database_url)
        try:
            yield
        finally:
            app.state.store.close()
            app.state.store = None

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.project_description,
        docs_url="/api-docs",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health", include_in_schema=False)
    async def health() -> dict:
        """Simple health endpoint to verify service readiness."""
        return {
            "status": "ok",
            "app": settings.project_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


# Create the application instance at import time so that ASGI servers
# can locate it.  The store itself is only opened when the app starts.
app = create_app()
