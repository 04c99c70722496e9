"""Entry point for the Book Catalog service.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the MongoDB connection string, database and
collection names, host and port is read from environment variables;
see ``book_catalog/app/core/config.py`` for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from book_catalog.app.core.config import settings
from book_catalog.app.main import app


async def main() -> None:
    """Start the catalog using Uvicorn.

    Host and port are read from the ``HOST`` and ``PORT`` environment
    variables.  Defaults are ``0.0.0.0`` and ``3030``.  A failure to
    prepare the collection at startup stops the server.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        lifespan="on",
        log_level=settings.log_level.lower(),  # already normalised by Settings
    )
    server = Server(config)
    await server.serve()
    if not server.started:
        # The lifespan hook failed: the collection is unusable.
        sys.exit(3)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logging.info("Book catalog stopped")
