"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from xoso_checker.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add("logs/app.log", rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)

    if settings.CLEANUP_ENABLED:
        try:
            from xoso_checker.scraper.scheduler import start_scheduler
            start_scheduler()
        except Exception as e:
            logger.warning("Failed to start scheduler: {}", e)

    yield

    if settings.CLEANUP_ENABLED:
        from xoso_checker.scraper.scheduler import stop_scheduler
        stop_scheduler()

    from xoso_checker.db.engine import engine
    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Dò vé số kiến thiết Miền Nam",
    lifespan=lifespan,
)

# Include API routers
from xoso_checker.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
