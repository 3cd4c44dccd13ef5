"""
Main entrypoint for the Weather Forecast API.

``create_app`` builds the object graph explicitly (settings ->
database -> repository -> service), configures logging, registers the
request-logging middleware and the catch-all error handler, and
includes the routers.  Migrations and seeding run in the lifespan
handler, so they happen when the server (or a ``TestClient`` used as
a context manager) starts.

A module-level ``app`` built from environment settings is provided
for ASGI servers::

    uvicorn weather_forecast_api.app.main:app --reload
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings
from .core.db import Database
from .core.logging_config import setup_logging
from .repositories.weather_forecast_repository import WeatherForecastRepository
from .services.weather_forecast_service import WeatherForecastService

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    """Log method, path, status and timing of every request."""
    start_time = time.perf_counter()
    response = await call_next(request)
    process_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        "%s %s -> %s in %.2fms (host=%s, user_agent=%s)",
        request.method,
        request.url.path,
        response.status_code,
        process_time,
        request.headers.get("host", ""),
        request.headers.get("user-agent", ""),
    )
    response.headers["X-Process-Time"] = f"{process_time:.2f}"
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception for %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected server error occurred."},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Read from the environment when omitted.

    Returns
    -------
    FastAPI
        A configured application.  ``app.state`` exposes ``settings``,
        ``database`` and ``forecast_service``.
    """
    if settings is None:
        settings = Settings.from_env()

    # Logging first so everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    database = Database(settings.database_url)
    forecast_service = WeatherForecastService(WeatherForecastRepository(database))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database.init_db()
        if settings.seed_on_startup:
            await forecast_service.seed_if_empty(settings.seed_count)
        logger.info("%s v%s started", settings.project_name, settings.api_version)
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.forecast_service = forecast_service

    app.middleware("http")(log_requests)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(api_router)

    return app


app = create_app()
