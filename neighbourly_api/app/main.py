"""
Main entrypoint for the Neighbourly API.

This module assembles the FastAPI application: logging, CORS for the
web client, database lifecycle hooks, error handlers and the routers.
``create_app`` builds the app, which is instantiated at import time as
``app`` so it can be served directly::

    uvicorn neighbourly_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

from .api.router import router
from .core.config import settings
from .core.db import close_client, init_db
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    # The client sends the token cookie, so credentials must be allowed
    # and origins listed explicitly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PyMongoError, database_error_handler)

    app.include_router(router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Your server is running..."

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()
        logger.info("Server is running on port %s", settings.port)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_client()

    return app


app = create_app()
