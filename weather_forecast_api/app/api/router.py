"""
Top-level router.

Forecast routes live under ``/weatherforecast``; the health check is
mounted at the root.
"""

from fastapi import APIRouter

from .endpoints import health, weather_forecasts

router = APIRouter()

router.include_router(weather_forecasts.router, prefix="/weatherforecast", tags=["weatherforecast"])
router.include_router(health.router, tags=["health"])
