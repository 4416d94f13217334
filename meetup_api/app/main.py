"""
Main entrypoint for the Meetup API.

This module assembles the FastAPI application, sets up logging, builds
the persistence handle and includes versioned routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn meetup_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment driven
        ``core.config.settings``.
    database : Optional[Database]
        Persistence handle.  Built from ``settings.database_url`` when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    database = database or Database(settings.database_url, echo=settings.debug)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        database.create_all()
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    register_error_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    logger.info("%s %s configured", settings.project_name, settings.api_version)
    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
