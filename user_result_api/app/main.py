"""
Main entrypoint for the User Result API.

This module assembles the FastAPI application: it configures logging,
creates the user store, installs the exception handlers and mounts the
API router under ``/api``.  ``create_app`` builds the app, and an
instance is created at import time as ``app`` so it can be served
with::

    uvicorn user_result_api.app.main:app --reload

Tests call ``create_app`` directly with their own ``Settings`` or
store so every test gets an isolated user table.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.responses import error_response
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.user_store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests as 400 with the standard error body."""
    message = _describe_validation_error(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def build_store(config: Settings) -> InMemoryUserStore:
    """Create the user store described by ``config``."""
    latency = config.store_latency_ms / 1000
    if config.seed_users:
        return InMemoryUserStore.seeded(latency=latency)
    return InMemoryUserStore(latency=latency)


def create_app(config: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use.  Defaults to the module-level ``settings``.
    store : Optional[UserStore]
        User store to serve.  When omitted a new in-memory store is
        built from ``config``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file)

    # OpenAPI docs are only published in debug mode.
    docs_kwargs = {} if config.debug else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(title=config.project_name, version=config.api_version, **docs_kwargs)

    app.state.user_store = store if store is not None else build_store(config)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")

    logger.info("%s %s ready", config.project_name, config.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
