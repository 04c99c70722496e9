"""
Main entrypoint for the Book Catalog service.

This module assembles the FastAPI application, sets up logging and
includes the page and API routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  Importing the app here makes it easy to run with
uvicorn or another ASGI server, e.g.::

    uvicorn book_catalog.app.main:app --reload

On startup the lifespan hook connects to MongoDB, makes sure the
collection exists and loads the starter books.  Any failure there is
raised out of the lifespan so the server never starts serving without
a usable collection.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import connect, init_db
from .core.errors import StoreError
from .core.logging_config import setup_logging
from .web.pages import router as pages_router

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of FastAPI's 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Return the validation errors without the raw input values."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


def create_app(app_settings: Optional[Settings] = None, client: Any = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module level ``settings``.
    client : Any
        A pymongo compatible client.  When omitted, a ``MongoClient``
        for ``app_settings.mongo_uri`` is created at startup and closed
        at shutdown.  Tests pass an in‑memory client here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned_client = client is None
        mongo = connect(app_settings) if owned_client else client
        try:
            # BootstrapError propagates and aborts startup.
            app.state.book_store = init_db(mongo, app_settings)
            logger.info(
                "Serving books from %s.%s",
                app_settings.database_name,
                app_settings.collection_name,
            )
            yield
        finally:
            app.state.book_store = None
            if owned_client:
                mongo.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.book_store = None

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)

    app.mount("/css", StaticFiles(directory=str(STATIC_DIR / "css")), name="css")
    app.include_router(pages_router, tags=["pages"])
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
