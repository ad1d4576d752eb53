"""
FastAPI application factory and configuration.
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from . import __version__
from .config.logging import bind_context, configure_logging
from .routers import formatting_router, system_router
from .utils.errors import DomainError, ERROR_CODES, error_payload

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Generate a per-request ID and attach to log records."""

    async def dispatch(self, request: Request, call_next):  # noqa: D401
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        bind_context(
            __name__,
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.time() - start_time) * 1000, 1),
        ).debug("request handled")
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    """Application lifespan management."""
    configure_logging()
    logger.info("Starting numify API %s", __version__)
    yield
    logger.info("Shutting down numify API")


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""

    application_obj = FastAPI(
        title="numify",
        description="Locale-aware compact number formatting",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan
    )

    application_obj.add_middleware(RequestIDMiddleware)
    setup_exception_handlers(application_obj)
    setup_routes(application_obj)

    return application_obj


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with standardized response."""
        # Sanitize error details to ensure all values JSON serializable
        sanitized = []
        for err in exc.errors():
            cleaned = {}
            for k, v in err.items():
                try:
                    import json as _json
                    _json.dumps(v)
                    cleaned[k] = v
                except (TypeError, ValueError):
                    cleaned[k] = str(v)
            sanitized.append(cleaned)
        return JSONResponse(
            status_code=422,
            content=error_payload(
                ERROR_CODES["validation"],
                "Request validation failed",
                details=sanitized,
                path=str(request.url.path),
            ),
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        bind_context(
            __name__,
            request_id=getattr(request.state, "request_id", None),
            code=exc.code,
        ).info(exc.message)
        return JSONResponse(
            status_code=422,
            content=error_payload(exc.code, exc.message, details=exc.details, path=str(request.url.path)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with standardized response."""
        code = ERROR_CODES["not_found"] if exc.status_code == 404 else 'HTTP_ERROR'
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(
                code,
                exc.detail,
                path=str(request.url.path),
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        bind_context(
            __name__,
            request_id=getattr(request.state, "request_id", None),
            path=request.url.path,
        ).error("Unhandled exception", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=error_payload(
                ERROR_CODES["internal"],
                "An unexpected error occurred",
                path=str(request.url.path),
            ),
        )


def setup_routes(app: FastAPI) -> None:
    """Setup application routes."""

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "status": "success",
            "data": {
                "message": "numify API",
                "version": __version__,
                "docs": "/docs",
                "health": "/health"
            },
            "timestamp": time.time()
        }

    app.include_router(system_router, tags=["System"])
    app.include_router(formatting_router, prefix="/api/v1", tags=["Formatting"])


# Create the application instance
app = create_application()


# Export for use in other modules
__all__ = ["app", "create_application"]
