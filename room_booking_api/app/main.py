"""
Main entrypoint for the Room Booking API.

This module assembles the FastAPI application, sets up logging,
installs error handlers and includes the API router under ``/api``.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn room_booking_api.app.main:app --port 3000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.errors import BookingAPIError, MissingField
from .core.logging_config import setup_logging
from .core.store import init_store


logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Build a short message naming the offending request fields.

    Body and query fields are named as the client sent them (their
    camelCase alias).  Path parameters are reported by the rejected
    segment rather than by the handler's argument name.
    """
    fields = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "path":
            fields.append(f"id '{error.get('input')}'")
            continue
        parts = [str(part) for part in loc if part not in ("body", "query")]
        if parts:
            fields.append(".".join(parts))
    if not fields:
        return MissingField.message
    return f"Missing or invalid field: {', '.join(dict.fromkeys(fields))}"


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"message": ...}`` with its status code."""

    @app.exception_handler(BookingAPIError)
    async def booking_api_error_handler(request: Request, exc: BookingAPIError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=MissingField.status_code,
            content={"message": _describe_validation_error(exc)},
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

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_store()
        logger.info("%s %s ready", settings.project_name, settings.api_version)

    return app


# Created at import time so uvicorn can discover it.
app = create_app()
