"""
Business logic for weather forecasts.

``WeatherForecastService`` sits between the HTTP routes and
``WeatherForecastRepository``.  Lookups of an unknown id return a
``NotFound`` value rather than raising; every other failure (for
example an unreachable database) propagates to the caller.

The module also provides ``generate_forecasts``, the random sample
generator used by the ``/weatherforecast/sample`` route and by
startup seeding.
"""

import datetime
import logging
import random
from typing import List, Optional, Union

from weather_forecast_api.app.core.errors import NotFound
from weather_forecast_api.app.repositories.weather_forecast_repository import (
    WeatherForecastRepository,
)
from weather_forecast_api.app.schemas.weather_forecast import (
    WeatherForecastCreate,
    WeatherForecastRead,
    WeatherForecastUpdate,
)

logger = logging.getLogger(__name__)

ENTITY_NAME = "WeatherForecast"

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Inclusive bounds for generated Celsius temperatures.
SAMPLE_MIN_TEMPERATURE_C = -20
SAMPLE_MAX_TEMPERATURE_C = 54


def generate_forecasts(
    days: int = 5,
    start: Optional[datetime.date] = None,
    rng: Optional[random.Random] = None,
) -> List[WeatherForecastCreate]:
    """Return ``days`` random, unsaved forecasts.

    The first forecast is for the day after ``start`` (today by
    default), each following one a day later.  Pass a seeded ``rng``
    for reproducible output.
    """
    if rng is None:
        rng = random.Random()
    if start is None:
        start = datetime.date.today()
    return [
        WeatherForecastCreate(
            date=start + datetime.timedelta(days=offset),
            temperature_c=rng.randint(SAMPLE_MIN_TEMPERATURE_C, SAMPLE_MAX_TEMPERATURE_C),
            summary=rng.choice(SUMMARIES),
        )
        for offset in range(1, days + 1)
    ]


class WeatherForecastService:
    """Service for managing stored forecasts."""

    def __init__(self, repository: WeatherForecastRepository) -> None:
        self.repository = repository

    async def list_forecasts(self) -> List[WeatherForecastRead]:
        return self.repository.list_all()

    async def get_forecast(self, forecast_id: int) -> Union[WeatherForecastRead, NotFound]:
        forecast = self.repository.get_by_id(forecast_id)
        if forecast is None:
            return NotFound(ENTITY_NAME, forecast_id)
        return forecast

    async def create_forecast(self, data: WeatherForecastCreate) -> WeatherForecastRead:
        """Store a new forecast.  No range checks are applied."""
        forecast = self.repository.create(data)
        logger.info("Created forecast %s for %s", forecast.id, forecast.date)
        return forecast

    async def update_forecast(
        self, forecast_id: int, data: WeatherForecastUpdate
    ) -> Union[WeatherForecastRead, NotFound]:
        """Overwrite date, temperature and summary of an existing forecast.

        All three fields are replaced, including a ``None`` summary.
        The id never changes and no row is created when ``forecast_id``
        does not exist.
        """
        existing = self.repository.get_by_id(forecast_id)
        if existing is None:
            return NotFound(ENTITY_NAME, forecast_id)

        updated = existing.model_copy(
            update={
                "date": data.date,
                "temperature_c": data.temperature_c,
                "summary": data.summary,
            }
        )
        forecast = self.repository.update(updated)
        logger.info("Updated forecast %s", forecast_id)
        return forecast

    async def delete_forecast(self, forecast_id: int) -> Optional[NotFound]:
        """Delete a forecast.  Returns ``NotFound`` if it does not exist."""
        forecast = self.repository.get_by_id(forecast_id)
        if forecast is None:
            return NotFound(ENTITY_NAME, forecast_id)

        self.repository.delete(forecast)
        logger.info("Deleted forecast %s", forecast_id)
        return None

    async def seed_if_empty(self, count: int = 10) -> int:
        """Insert ``count`` generated forecasts when the table is empty.

        Returns the number of rows inserted, ``0`` if data was already
        present.
        """
        if self.repository.any():
            logger.debug("Forecast table already populated, skipping seed")
            return 0
        inserted = self.repository.add_range(generate_forecasts(days=count))
        logger.info("Seeded %s sample forecasts", inserted)
        return inserted
