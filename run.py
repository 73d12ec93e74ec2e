"""Entry point for the album API server.

Starts the FastAPI application with uvicorn on the host and port taken
from settings (``HOST`` and ``PORT``, default ``localhost:8080``).

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from album_api.app.core.config import settings
from album_api.app.core.logging_config import parse_level
from album_api.app.main import app

logger = logging.getLogger("album_api.run")

ENDPOINTS = (
    ("GET", "/albums", "List all albums"),
    ("GET", "/albums/:id", "Get album by ID"),
    ("POST", "/albums", "Create new album"),
    ("DELETE", "/albums/:id", "Delete album by ID"),
    ("PATCH", "/albums/:id", "Update album by ID"),
    ("GET", "/", "Health check"),
)


def log_banner() -> None:
    logger.info("Starting Album API server...")
    logger.info("Server listening on http://%s", settings.server_address)
    logger.info("Available endpoints:")
    for method, path, description in ENDPOINTS:
        logger.info("  %-6s %-11s - %s", method, path, description)


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Logging is set up by create_app; keep uvicorn from replacing it.
        log_config=None,
        log_level=parse_level(settings.log_level),
    )
    server = Server(config)
    log_banner()
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)
