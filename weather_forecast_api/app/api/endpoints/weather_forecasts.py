"""
Weather forecast endpoints.

CRUD routes over the stored forecasts plus ``/sample``, which returns
freshly generated random forecasts without saving them.  A ``NotFound``
result from the service becomes an HTTP 404.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from weather_forecast_api.app.api.dependencies import get_forecast_service
from weather_forecast_api.app.core.errors import NotFound
from weather_forecast_api.app.schemas.weather_forecast import (
    WeatherForecastBase,
    WeatherForecastCreate,
    WeatherForecastRead,
    WeatherForecastUpdate,
)
from weather_forecast_api.app.services.weather_forecast_service import (
    WeatherForecastService,
    generate_forecasts,
)

router = APIRouter()


def _not_found(result: NotFound) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)


@router.get("", response_model=List[WeatherForecastRead])
async def list_forecasts(
    service: WeatherForecastService = Depends(get_forecast_service),
) -> List[WeatherForecastRead]:
    """Return every stored forecast, ordered by id."""
    return await service.list_forecasts()


# Declared before ``/{forecast_id}`` so "sample" is not parsed as an id.
@router.get("/sample", response_model=List[WeatherForecastBase])
async def sample_forecasts(
    days: int = Query(5, ge=1, le=30),
) -> List[WeatherForecastBase]:
    """Return ``days`` random forecasts starting tomorrow.  Nothing is stored."""
    return generate_forecasts(days=days)


@router.get("/{forecast_id}", response_model=WeatherForecastRead)
async def get_forecast(
    forecast_id: int,
    service: WeatherForecastService = Depends(get_forecast_service),
) -> WeatherForecastRead:
    """Retrieve a single forecast.  Returns HTTP 404 if it does not exist."""
    result = await service.get_forecast(forecast_id)
    if isinstance(result, NotFound):
        raise _not_found(result)
    return result


@router.post("", response_model=WeatherForecastRead, status_code=status.HTTP_201_CREATED)
async def create_forecast(
    forecast_in: WeatherForecastCreate,
    request: Request,
    response: Response,
    service: WeatherForecastService = Depends(get_forecast_service),
) -> WeatherForecastRead:
    """Create a forecast and point the ``Location`` header at it."""
    forecast = await service.create_forecast(forecast_in)
    response.headers["Location"] = str(request.app.url_path_for("get_forecast", forecast_id=forecast.id))
    return forecast


@router.put("/{forecast_id}", response_model=WeatherForecastRead)
async def update_forecast(
    forecast_id: int,
    forecast_in: WeatherForecastUpdate,
    service: WeatherForecastService = Depends(get_forecast_service),
) -> WeatherForecastRead:
    """Replace date, temperature and summary of an existing forecast."""
    result = await service.update_forecast(forecast_id, forecast_in)
    if isinstance(result, NotFound):
        raise _not_found(result)
    return result


@router.delete("/{forecast_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_forecast(
    forecast_id: int,
    service: WeatherForecastService = Depends(get_forecast_service),
) -> None:
    """Delete a forecast.  Returns HTTP 404 if it does not exist."""
    result = await service.delete_forecast(forecast_id)
    if isinstance(result, NotFound):
        raise _not_found(result)
    return None
