"""FastAPI application factory and configuration."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from srt_translator.api.v1 import api_router
from srt_translator.core.config import get_settings
from srt_translator.core.logging import setup_logging
from srt_translator.core.middleware import setup_middleware
from srt_translator.services.sessions import session_registry

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(
        "Application startup: %s %s (%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
    )

    yield

    logger.info("Application shutdown: Cleaning up resources")
    cancelled = session_registry.cancel_all()
    if cancelled:
        logger.info("Cancelled %d in-flight translation batch(es)", cancelled)
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    setup_middleware(app)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "srt_translator.main:app",
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        reload=False,
    )
