"""Testing App

FastAPI application exposing the service health check.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.deps import get_health_service
from .api.errors import register_exception_handlers
from .api.middleware import add_request_logging
from .api.routers import HEALTHCHECK_PATH, health_router
from .config import settings
from .log import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown logic"""
    logger.info("Starting %s v%s (%s)", settings.app_name, settings.app_version, settings.environment)
    # Misconfiguration must fail startup, not individual requests
    get_health_service()
    yield
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)
add_request_logging(app, api_version=settings.api_version, quiet_paths=frozenset({HEALTHCHECK_PATH}))

# Add CORS middleware
if settings.cors_origins:
    origins = settings.cors_origins.split(",")
    # A literal "*" cannot be combined with credentials; match any origin instead
    wildcard = origins == ["*"] and settings.cors_credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[] if wildcard else origins,
        allow_origin_regex=".*" if wildcard else None,
        allow_credentials=settings.cors_credentials,
        allow_methods=settings.cors_methods.split(","),
        allow_headers=settings.cors_headers.split(","),
        max_age=settings.cors_max_age,
    )

app.include_router(health_router)


def run() -> None:
    """Serve the app with uvicorn using configured host and port."""
    uvicorn.run(
        "testing_app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
