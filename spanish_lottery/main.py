"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from spanish_lottery.config import settings
from spanish_lottery.exceptions import InvalidInputError
from spanish_lottery.services.data_provider import HistoricalDataProvider

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add(str(settings.LOG_FILE), rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)

    app.state.provider = HistoricalDataProvider()

    # Start scheduler if enabled
    if settings.SCHEDULER_ENABLED:
        try:
            from spanish_lottery.scraper.scheduler import start_scheduler
            start_scheduler(app.state.provider)
            logger.info("Cache refresh scheduler started")
        except Exception as e:
            logger.warning("Failed to start scheduler: {}", e)

    yield

    # Shutdown
    if settings.SCHEDULER_ENABLED:
        from spanish_lottery.scraper.scheduler import stop_scheduler
        stop_scheduler()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Generador de combinaciones para loterías españolas con análisis estadístico",
    lifespan=lifespan,
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Include API routers
from spanish_lottery.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
