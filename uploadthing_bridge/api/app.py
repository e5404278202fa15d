"""Litestar application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.logging import LoggingConfig
from litestar.openapi import OpenAPIConfig
from litestar.openapi.spec import Contact, Server

from uploadthing_bridge import __version__
from uploadthing_bridge.api.dependencies import dependencies, init_services, shutdown_services
from uploadthing_bridge.api.routes import FileController, HealthController
from uploadthing_bridge.core.config import get_settings

logger = logging.getLogger(__name__)

# Headroom for multipart framing on top of the file size limit
MULTIPART_OVERHEAD_BYTES = 1024 * 1024


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Application lifespan manager.

    Initializes services on startup and cleans up on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting UploadThing service on port {settings.api_port}")

    await init_services(settings)

    try:
        yield
    finally:
        logger.info("Shutting down UploadThing service")
        await shutdown_services()


def create_app() -> Litestar:
    """Create and configure Litestar application.

    Returns:
        Configured Litestar application instance.
    """
    settings = get_settings()

    # Only the calling backend may use the facade from a browser context
    cors_config = CORSConfig(
        allow_origins=[settings.cors_origin],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    # Logging configuration
    logging_config = LoggingConfig(
        root={
            "level": "DEBUG" if settings.debug else "INFO",
            "handlers": ["console"],
        },
        formatters={
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        handlers={
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        loggers={
            "uploadthing_bridge": {
                "level": "DEBUG" if settings.debug else "INFO",
                "propagate": True,
            },
            "httpx": {
                "level": "WARNING",
                "propagate": False,
            },
        },
    )

    # OpenAPI documentation configuration
    openapi_config = OpenAPIConfig(
        title="UploadThing Bridge API",
        version=__version__,
        description="REST facade over the UploadThing file API",
        contact=Contact(name="API Support"),
        servers=[
            Server(
                url=f"http://{settings.api_host}:{settings.api_port}",
                description="Local development server",
            ),
        ],
        path="/docs",
    )

    return Litestar(
        route_handlers=[
            HealthController,
            FileController,
        ],
        dependencies=dependencies,
        lifespan=[lifespan],
        cors_config=cors_config,
        logging_config=logging_config,
        openapi_config=openapi_config,
        debug=settings.debug,
        request_max_body_size=settings.max_upload_size_bytes + MULTIPART_OVERHEAD_BYTES,
    )


# Application instance for uvicorn
app = create_app()
