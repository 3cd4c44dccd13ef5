"""
Pydantic models for weather forecast data.

Fields use snake_case in Python and lowerCamelCase on the wire
(``temperatureC``, ``temperatureF``).  Requests may use either form.
``temperatureF`` is computed from ``temperatureC`` on every read and
is never stored; values sent by clients for it (or for ``id``) are
ignored.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Width of the summary column in the original schema.  Only used as a
# documentation hint, longer values are accepted and stored as is.
SUMMARY_MAX_LENGTH = 100

# Temperatures are stored as 32-bit integers.  This bounds the storage
# type only; no physical range is enforced.
TEMPERATURE_C_MIN = -(2**31)
TEMPERATURE_C_MAX = 2**31 - 1


def celsius_to_fahrenheit(temperature_c: int) -> int:
    """Convert Celsius to Fahrenheit as ``32 + trunc(c / 0.5556)``.

    The quotient is truncated toward zero, so the result is often one
    degree below the exact conversion: 20 -> 67, -40 -> -39.
    """
    return 32 + int(temperature_c / 0.5556)


class WeatherForecastBase(BaseModel):
    date: datetime.date = Field(..., examples=["2025-09-01"])
    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        ge=TEMPERATURE_C_MIN,
        le=TEMPERATURE_C_MAX,
        examples=[21],
    )
    summary: Optional[str] = Field(
        None,
        examples=["Mild"],
        description=f"Short label, conventionally at most {SUMMARY_MAX_LENGTH} characters",
    )

    model_config = ConfigDict(populate_by_name=True)

    @computed_field(alias="temperatureF")  # type: ignore[prop-decorator]
    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)


class WeatherForecastCreate(WeatherForecastBase):
    """Schema for creating a forecast."""
    pass


class WeatherForecastUpdate(WeatherForecastBase):
    """Schema for replacing the mutable fields of a forecast.

    All three fields are overwritten; this is not a partial merge.
    """
    pass


class WeatherForecastRead(WeatherForecastBase):
    """Schema for a stored forecast."""

    id: int

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class HealthStatus(BaseModel):
    status: str = "healthy"
