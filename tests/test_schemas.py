"""Tests for the forecast schemas and the Fahrenheit conversion."""

import datetime

import pytest
from hypothesis import given, strategies as st

from weather_forecast_api.app.schemas.weather_forecast import (
    HealthStatus,
    WeatherForecastCreate,
    WeatherForecastRead,
    celsius_to_fahrenheit,
)


@pytest.mark.parametrize(
    "celsius, fahrenheit",
    [
        (0, 32),
        (1, 33),
        (-1, 31),
        (5, 40),
        (20, 67),
        (-20, -3),
        (35, 94),
        (100, 211),
        (-40, -39),
    ],
)
def test_celsius_to_fahrenheit_golden_values(celsius: int, fahrenheit: int):
    assert celsius_to_fahrenheit(celsius) == fahrenheit


def test_celsius_to_fahrenheit_handles_32_bit_extremes():
    assert celsius_to_fahrenheit(2**31 - 1) > 0
    assert celsius_to_fahrenheit(-(2**31)) < 0


@given(st.integers(min_value=-10_000, max_value=10_000))
def test_conversion_truncates_toward_zero(celsius: int):
    # Truncation is symmetric around zero; floor division would not be.
    assert celsius_to_fahrenheit(-celsius) - 32 == -(celsius_to_fahrenheit(celsius) - 32)


@given(st.integers(min_value=-1_000, max_value=1_000))
def test_conversion_stays_close_to_exact_formula(celsius: int):
    exact = 32 + celsius * 9 / 5
    assert abs(celsius_to_fahrenheit(celsius) - exact) < 2


@given(
    st.integers(min_value=-10_000, max_value=10_000),
    st.integers(min_value=-10_000, max_value=10_000),
)
def test_conversion_is_monotonic(a: int, b: int):
    low, high = sorted((a, b))
    assert celsius_to_fahrenheit(low) <= celsius_to_fahrenheit(high)


def test_read_schema_serializes_camel_case():
    forecast = WeatherForecastRead(
        id=1, date=datetime.date(2025, 9, 1), temperature_c=20, summary="Mild"
    )
    assert forecast.model_dump(mode="json", by_alias=True) == {
        "id": 1,
        "date": "2025-09-01",
        "temperatureC": 20,
        "summary": "Mild",
        "temperatureF": 67,
    }


def test_create_schema_accepts_camel_and_snake_case():
    camel = WeatherForecastCreate.model_validate({"date": "2025-09-01", "temperatureC": 5})
    snake = WeatherForecastCreate.model_validate({"date": "2025-09-01", "temperature_c": 5})
    assert camel == snake
    assert camel.summary is None
    assert camel.temperature_f == 40


def test_create_schema_ignores_client_supplied_id_and_fahrenheit():
    forecast = WeatherForecastCreate.model_validate(
        {"id": 99, "date": "2025-09-01", "temperatureC": 20, "temperatureF": 1000}
    )
    assert forecast.temperature_f == 67
    assert "id" not in forecast.model_dump()


def test_create_schema_rejects_missing_temperature():
    with pytest.raises(ValueError):
        WeatherForecastCreate.model_validate({"date": "2025-09-01"})


@pytest.mark.parametrize(
    "summary",
    [
        None,
        "",
        "   ",
        "A" * 10_000,
        'Temperature: 20°C ☀️ "Hot" & <Sunny>',
        "晴れ 太陽 🌞 Sól солнце",
    ],
)
def test_summary_is_stored_verbatim(summary):
    forecast = WeatherForecastCreate(
        date=datetime.date(2025, 9, 1), temperature_c=20, summary=summary
    )
    assert forecast.summary == summary


@pytest.mark.parametrize("day", [datetime.date.min, datetime.date.max])
def test_date_extremes_serialize_as_iso(day: datetime.date):
    forecast = WeatherForecastCreate(date=day, temperature_c=0)
    assert forecast.model_dump(mode="json", by_alias=True)["date"] == day.isoformat()


def test_fahrenheit_follows_celsius_after_copy():
    forecast = WeatherForecastRead(id=1, date=datetime.date(2025, 1, 1), temperature_c=0)
    warmer = forecast.model_copy(update={"temperature_c": 100})
    assert forecast.temperature_f == 32
    assert warmer.temperature_f == 211


def test_health_status_default():
    assert HealthStatus().model_dump() == {"status": "healthy"}


@pytest.mark.parametrize("temperature", [2**31, -(2**31) - 1, 2**63])
def test_temperature_outside_32_bit_range_is_rejected(temperature: int):
    with pytest.raises(ValueError):
        WeatherForecastCreate.model_validate({"date": "2025-09-01", "temperatureC": temperature})
