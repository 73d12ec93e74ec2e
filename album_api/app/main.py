"""
Main entrypoint for the Album API.

This module assembles the FastAPI application, sets up logging, creates
the album store and registers the error handlers that give every
failure its JSON shape.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn album_api.app.main:app --reload

``run.py`` at the project root starts the same app on the configured
host and port.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import AlbumNotFoundError, AlbumValidationError
from .core.logging_config import setup_logging
from .core.responses import IndentedJSONResponse
from .core.store import AlbumStore, init_store

logger = logging.getLogger(__name__)


def _describe_decode_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        message = error.get("msg", "invalid value")
        if error.get("type") == "json_invalid":
            reason = (error.get("ctx") or {}).get("error", "")
            parts.append(f"JSON decode error: {reason}" if reason else message)
            continue
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request body"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> IndentedJSONResponse:
    details = _describe_decode_errors(exc)
    logger.debug("Rejected %s %s body: %s", request.method, request.url.path, details)
    return IndentedJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid JSON", "details": details},
    )


async def album_validation_handler(request: Request, exc: AlbumValidationError) -> IndentedJSONResponse:
    return IndentedJSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def album_not_found_handler(request: Request, exc: AlbumNotFoundError) -> IndentedJSONResponse:
    logger.debug("Album %s not found", exc.album_id)
    return IndentedJSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


def create_app(store: Optional[AlbumStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[AlbumStore]
        Album store to serve.  When omitted a new store is created by
        ``init_store`` according to ``settings.seed_albums``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so the store can log.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s %s ready with %d album(s)", settings.project_name, settings.api_version, len(app.state.album_store))
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        default_response_class=IndentedJSONResponse,
        lifespan=lifespan,
    )
    app.state.album_store = store if store is not None else init_store()

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AlbumValidationError, album_validation_handler)
    app.add_exception_handler(AlbumNotFoundError, album_not_found_handler)

    # Album routes are served from the root: /albums and /.
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
