"""Input Validator — minimal text validation service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from input_validator.config import Settings, get_settings
from input_validator.api.router import api_router, root_router
from input_validator.api.spa import register_spa

logger = structlog.get_logger()

MALFORMED_REQUEST_MESSAGE = 'Missing or invalid "value" field'


def configure_logging(settings: Settings) -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.LOG_LEVEL.upper())
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings: Settings = app.state.settings

    logger.info("app_starting", environment=settings.ENVIRONMENT, debug=settings.DEBUG)

    yield

    logger.info("app_stopped")


async def malformed_request_handler(request: Request, exc: RequestValidationError):
    """Reject bodies that are not ``{"value": <string>}``."""
    logger.info(
        "malformed_request",
        path=request.url.path,
        errors=[e.get("type") for e in exc.errors()],
    )
    return JSONResponse(status_code=400, content={"error": MALFORMED_REQUEST_MESSAGE})


async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Input Validator",
        description=(
            "Validates a text input against two rules (longer than 8 characters, "
            "contains a digit) and reports word and letter counts."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Middleware ──

    # The form dev server runs on another origin
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ── Exception Handlers ──

    app.add_exception_handler(RequestValidationError, malformed_request_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # ── Routes ──

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint — liveness text."""
        return "Backend is running. Use POST /api/validate"

    app.include_router(api_router, prefix="/api")
    app.include_router(root_router)

    # Catch-all must be registered last
    if settings.is_production:
        register_spa(app, settings.STATIC_DIR)

    return app


# ── Create Application ──

app = create_app()
