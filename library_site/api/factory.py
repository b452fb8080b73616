"""
API Factory

Centralized API setup with middleware, CORS, and monitoring configuration.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from library_site.api.errors import register_exception_handlers
from library_site.api.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from library_site.api.router import router
from library_site.core.config import settings
from library_site.core.logfire_config import initialize_logfire
from library_site.core.logger import get_logger
from library_site.stores.database import create_tables, dispose_engine

logger = get_logger(__name__)


def setup_cors(app: FastAPI) -> None:
    """
    Setup CORS middleware with configurable origins.

    Args:
        app: FastAPI application instance
    """
    cors_origins = settings.cors_allow_origins_list

    # Only add CORS middleware if origins are configured
    if cors_origins and cors_origins != [""]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=settings.cors__allow_credentials,
            allow_methods=settings.cors_allow_methods_list,
            allow_headers=settings.cors_allow_headers_list,
        )
        logger.info("CORS middleware configured for origins: %s", cors_origins)
    else:
        logger.info("CORS middleware skipped (no origins configured)")


def setup_compression(app: FastAPI) -> None:
    """
    Setup response compression middleware.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    logger.info("GZip compression middleware configured")


def setup_logging_middleware(app: FastAPI) -> None:
    """
    Setup request logging and ID middleware.

    Args:
        app: FastAPI application instance
    """
    # Last added runs first, so the ID is set before the request is logged
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logger.info("Request logging and ID middleware configured")


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Setup global exception handlers.

    Args:
        app: FastAPI application instance
    """
    register_exception_handlers(app)
    logger.info("Global exception handlers configured")


def setup_logfire_instrumentation(app: FastAPI) -> None:
    """
    Setup Logfire configuration and instrumentation.

    Args:
        app: FastAPI application instance
    """
    try:
        results = initialize_logfire(app)
    except Exception as e:
        logger.warning("Failed to initialize Logfire: %s", e)
        return

    if not results["configured"]:
        logger.debug("Logfire initialization skipped (disabled)")
        return

    enabled = [name for name, ok in results["instrumentation"].items() if ok]
    if enabled:
        logger.info("Logfire instrumentation enabled for: %s", ", ".join(enabled))
    else:
        logger.debug("No Logfire instrumentation enabled")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("%s starting (%s)", app.title, settings.environment)
    create_tables()
    yield
    dispose_engine()
    logger.info("%s stopped", app.title)


def create_api(
    title: str = settings.api__title,
    description: str = settings.api__description,
    version: str = settings.api__version,
    docs_url: str = settings.api__docs_url,
    redoc_url: str = settings.api__redoc_url,
    enable_cors: bool = True,
    enable_compression: bool = True,
    enable_logfire: bool = True,
    mount_prefix: str = "/api",
) -> FastAPI:
    """
    Create and configure FastAPI application with all middleware.

    Args:
        title: API title
        description: API description
        version: API version
        docs_url: URL path for API documentation (Swagger UI)
        redoc_url: URL path for ReDoc documentation
        enable_cors: Whether to enable CORS middleware
        enable_compression: Whether to enable GZip compression
        enable_logfire: Whether to configure Logfire instrumentation
        mount_prefix: Prefix for mounting the API router

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Setup middleware in reverse order (last added = first executed)

    if enable_compression:
        setup_compression(app)

    if enable_cors:
        setup_cors(app)

    setup_logging_middleware(app)
    setup_exception_handlers(app)

    if enable_logfire:
        setup_logfire_instrumentation(app)

    app.include_router(router, prefix=mount_prefix)

    logger.info("API factory created: %s v%s", title, version)
    return app


__all__ = ["create_api"]
