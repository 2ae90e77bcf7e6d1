"""Entry point for the SightShare API server.

Starts the FastAPI application under Uvicorn on the port given by the
``PORT`` environment variable (default ``3000``).  Uvicorn handles
SIGINT and SIGTERM by finishing in-flight requests and running the
application shutdown, which closes the SQLite database, before the
process exits with status 0.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from sightshare_api.app.core.config import settings
from sightshare_api.app.main import app


async def main() -> None:
    """Serve the API until a termination signal arrives."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()
    logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
