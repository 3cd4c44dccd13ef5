"""Repository for the ``weather_forecasts`` table."""

import datetime
import sqlite3
from typing import Iterable, List, Optional

from weather_forecast_api.app.core.db import Database
from weather_forecast_api.app.schemas.weather_forecast import (
    WeatherForecastBase,
    WeatherForecastRead,
)

_COLUMNS = "id, date, temperature_c, summary"

# SQLite INTEGER is a signed 64-bit value; larger ids cannot name a row.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


class WeatherForecastRepository:
    """CRUD access to stored forecasts.

    Every method runs in its own unit of work and commits
    independently.  ``get_by_id`` reports a missing row as ``None``;
    the remaining methods expect a forecast that exists.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    def list_all(self) -> List[WeatherForecastRead]:
        with self.database.cursor() as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM weather_forecasts ORDER BY id"
            ).fetchall()
        return [self._row_to_forecast(row) for row in rows]

    def get_by_id(self, forecast_id: int) -> Optional[WeatherForecastRead]:
        if not SQLITE_INTEGER_MIN <= forecast_id <= SQLITE_INTEGER_MAX:
            return None
        with self.database.cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM weather_forecasts WHERE id = ?",
                (forecast_id,),
            ).fetchone()
        if row is None:
            return None
        return self._row_to_forecast(row)

    def create(self, data: WeatherForecastBase) -> WeatherForecastRead:
        """Insert a forecast and return it with its generated id."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "INSERT INTO weather_forecasts (date, temperature_c, summary) VALUES (?, ?, ?)",
                self._params(data),
            )
            forecast_id = cursor.lastrowid
        return WeatherForecastRead(
            id=forecast_id,
            date=data.date,
            temperature_c=data.temperature_c,
            summary=data.summary,
        )

    def update(self, forecast: WeatherForecastRead) -> WeatherForecastRead:
        """Write all mutable columns of ``forecast`` back to its row."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "UPDATE weather_forecasts SET date = ?, temperature_c = ?, summary = ? WHERE id = ?",
                (*self._params(forecast), forecast.id),
            )
        return forecast

    def delete(self, forecast: WeatherForecastRead) -> None:
        with self.database.cursor() as cursor:
            cursor.execute("DELETE FROM weather_forecasts WHERE id = ?", (forecast.id,))

    def any(self) -> bool:
        """Return ``True`` if at least one forecast is stored."""
        with self.database.cursor() as cursor:
            row = cursor.execute(
                "SELECT EXISTS (SELECT 1 FROM weather_forecasts) AS found"
            ).fetchone()
        return bool(row["found"])

    def add_range(self, forecasts: Iterable[WeatherForecastBase]) -> int:
        """Insert many forecasts in a single commit.  Returns the count."""
        params = [self._params(forecast) for forecast in forecasts]
        if not params:
            return 0
        with self.database.cursor() as cursor:
            cursor.executemany(
                "INSERT INTO weather_forecasts (date, temperature_c, summary) VALUES (?, ?, ?)",
                params,
            )
        return len(params)

    @staticmethod
    def _params(forecast: WeatherForecastBase) -> tuple:
        return (forecast.date.isoformat(), forecast.temperature_c, forecast.summary)

    @staticmethod
    def _row_to_forecast(row: sqlite3.Row) -> WeatherForecastRead:
        return WeatherForecastRead(
            id=row["id"],
            date=datetime.date.fromisoformat(row["date"]),
            temperature_c=row["temperature_c"],
            summary=row["summary"],
        )
