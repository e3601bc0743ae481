"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, chatstore.api, chatstore.observability, chatstore.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatstore import __version__
from chatstore.api.error_handlers import register_exception_handlers
from chatstore.api.routers import health_router, messages_router, sessions_router
from chatstore.boundary.db import dispose_engine, init_models
from chatstore.configs import get_settings
from chatstore.observability.logger import configure_logging
from chatstore.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and creates missing tables on startup; releases
    pooled database connections on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={"environment": settings.environment, "version": __version__},
    )

    try:
        await init_models()
    except Exception as e:
        logger.exception("Failed to initialize database", extra={"error": str(e)})
        raise

    yield

    logger.info("Application shutdown")
    await dispose_engine()


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Storage for RAG chat sessions, messages and retrieval context",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added first = innermost; correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allowed_origins_list,
        allow_credentials=False,
        allow_methods=cors.allowed_methods_list,
        allow_headers=cors.allowed_headers_list,
        expose_headers=[CORRELATION_HEADER],
        max_age=cors.max_age,
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(messages_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chatstore.main:app",
        host="0.0.0.0",
        port=8080,
        reload=get_settings().debug,
    )
