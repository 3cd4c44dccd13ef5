"""
Configuration management.

``Settings`` is a frozen dataclass.  Build it once at process start
with ``Settings.from_env()`` (or construct it directly in tests) and
pass it to ``create_app``; nothing else in the application reads
environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from weather_forecast_api import __version__

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "Weather Forecast API"
    api_version: str = __version__
    debug: bool = False
    log_level: str = "INFO"
    # Optional path of a log file written in addition to the console.
    log_file: Optional[str] = None

    # Path of the SQLite database file, or ``:memory:`` for a private
    # in-memory database.  Relative paths are resolved against the
    # project root by ``core.db``.
    database_url: str = "weather_forecast.db"

    # Insert ``seed_count`` sample rows at startup when the table is empty.
    seed_on_startup: bool = True
    seed_count: int = 10

    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Unset variables fall back to the dataclass defaults.  ``environ``
        defaults to ``os.environ`` and exists so tests can pass a plain
        dict.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        log_file = env.get("LOG_FILE") or None
        return cls(
            project_name=env.get("PROJECT_NAME", defaults.project_name),
            api_version=env.get("API_VERSION", defaults.api_version),
            debug=_as_bool(env.get("DEBUG", "false")),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
            log_file=log_file,
            database_url=env.get("DATABASE_URL", defaults.database_url),
            seed_on_startup=_as_bool(env.get("SEED_ON_STARTUP", "true")),
            seed_count=int(env.get("SEED_COUNT", str(defaults.seed_count))),
            host=env.get("API_HOST", defaults.host),
            port=int(env.get("API_PORT", str(defaults.port))),
        )
