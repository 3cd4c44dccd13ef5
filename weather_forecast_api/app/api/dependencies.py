"""FastAPI dependencies for the Weather Forecast API."""

from fastapi import Request

from weather_forecast_api.app.services.weather_forecast_service import WeatherForecastService


def get_forecast_service(request: Request) -> WeatherForecastService:
    """Return the service instance wired by ``create_app``."""
    return request.app.state.forecast_service
