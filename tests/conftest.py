"""Shared test fixtures."""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from weather_forecast_api.app.core.config import Settings
from weather_forecast_api.app.core.db import MEMORY_URL, Database
from weather_forecast_api.app.main import create_app
from weather_forecast_api.app.repositories.weather_forecast_repository import (
    WeatherForecastRepository,
)
from weather_forecast_api.app.services.weather_forecast_service import WeatherForecastService


@pytest.fixture
def settings() -> Settings:
    """Settings for an app backed by a private in-memory database."""
    return Settings(database_url=MEMORY_URL, seed_on_startup=True, seed_count=10)


@pytest.fixture
def database() -> Iterator[Database]:
    db = Database(MEMORY_URL)
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def repository(database: Database) -> WeatherForecastRepository:
    return WeatherForecastRepository(database)


@pytest.fixture
def service(repository: WeatherForecastRepository) -> WeatherForecastService:
    return WeatherForecastService(repository)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with startup (migrations and seeding) already run."""
    with TestClient(app) as test_client:
        yield test_client
