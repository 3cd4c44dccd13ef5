"""Liveness endpoint used by container orchestrators and load balancers."""

from fastapi import APIRouter

from weather_forecast_api.app.schemas.weather_forecast import HealthStatus

router = APIRouter()


@router.get("/healthz", response_model=HealthStatus)
async def healthz() -> HealthStatus:
    """Return a fixed ``{"status": "healthy"}`` payload."""
    return HealthStatus()
