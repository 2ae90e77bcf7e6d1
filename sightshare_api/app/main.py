"""
Main entrypoint for the SightShare API.

This module assembles the FastAPI application: logging, CORS, the
``/api`` routers, the error handlers and the static admin dashboard.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app`` so it can be served
with uvicorn::

    uvicorn sightshare_api.app.main:app

The SQLite database is opened when the application starts and closed
when it shuts down; uvicorn runs that shutdown on SIGINT and SIGTERM.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, closing
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.middleware import TrailingSlashMiddleware
from .api.router import router as api_router
from .container import build_container
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.exceptions import SightShareError, StorageError, ValidationError
from .core.logging_config import setup_logging

ADMIN_PAGE = "admin.html"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the settings read from the
        environment.  Tests pass their own to point at a temporary
        database.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file, settings.access_log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # uvicorn resets its access logger when the server starts.
        setup_logging(settings.log_level, settings.log_file, settings.access_log_level)
        container = build_container(settings, Database.from_settings(settings))
        with closing(container):
            container.database.init_db()
            app.state.container = container
            logger.info("%s running on port %s", settings.project_name, settings.port)
            logger.info("Admin Dashboard: http://localhost:%s", settings.port)
            logger.info("API Endpoints: http://localhost:%s/api", settings.port)
            yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(TrailingSlashMiddleware, prefix="/api/")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        # The cause was already logged with its traceback by the db module.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(SightShareError)
    async def sightshare_error_handler(request: Request, exc: SightShareError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed bodies and ids are client errors like a missing field.
        return JSONResponse(status_code=400, content={"error": _describe(exc)})

    public_dir = Path(settings.public_dir)

    @app.get("/", include_in_schema=False)
    async def admin_dashboard() -> FileResponse:
        """Serve the admin dashboard."""
        return FileResponse(public_dir / ADMIN_PAGE, media_type="text/html")

    if public_dir.is_dir():
        # Mounted last so that every route above takes precedence.
        app.mount("/", StaticFiles(directory=public_dir), name="public")
    else:
        logger.warning("Public directory %s not found; static files disabled", public_dir)

    return app


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"Invalid request: {location}: {message}" if location else f"Invalid request: {message}"


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
