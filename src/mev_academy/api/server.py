"""
FastAPI application for the MEV Academy backend.

``create_app`` wires settings, services, middleware, exception handlers,
routes and the ``/ws`` feed endpoint.
"""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from mev_academy import __version__
from mev_academy.api.feeds import feed_endpoint
from mev_academy.api.middleware import install_middleware
from mev_academy.api.responses import OrjsonResponse, failure
from mev_academy.api.routes import ROUTERS
from mev_academy.api.services import Services, build_services
from mev_academy.config.settings import Settings, get_settings
from mev_academy.telemetry.logger import setup_logging


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    async_logger = setup_logging(settings.log_level, settings.log_file)
    logger.info(f"MEV Academy API starting ({settings.environment})")
    try:
        yield
    finally:
        await app.state.services.close()
        logger.info("MEV Academy API stopped")
        async_logger.stop()


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Invalid request: " + "; ".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    message = _describe_validation_error(exc)
    logger.debug(f"{request.method} {request.url.path} rejected: {message}")
    return failure(message, status_code=400)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404:
        return failure(f"Not Found - {request.url.path}", status_code=404)
    return failure(str(exc.detail), status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> Response:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return failure("Something went wrong!", status_code=500)


def create_app(
    settings: Settings | None = None,
    services: Services | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Application settings, loaded from the environment when omitted.
        services: Service container, built from ``settings`` when omitted.
    """
    settings = settings or get_settings()
    services = services or build_services(settings)

    app = FastAPI(
        title="MEV Academy API",
        version=__version__,
        lifespan=lifespan,
        default_response_class=OrjsonResponse,
    )
    app.state.settings = settings
    app.state.services = services
    app.state.started_at = time.monotonic()

    install_middleware(app, settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    for router in ROUTERS:
        app.include_router(router)
    app.websocket("/ws")(feed_endpoint)
    return app
