"""
Process entry point: serve the application with Uvicorn.

Uvicorn imports ``weather_forecast_api.app.main:app``, which is built
from environment settings exactly once.  Host and port come from
``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``); see
``core.config`` for the other variables.
"""

import asyncio
import logging

from uvicorn import Config, Server

from .core.config import Settings

APP_IMPORT_PATH = "weather_forecast_api.app.main:app"


def build_config(settings: Settings) -> Config:
    """Uvicorn configuration for ``settings``; the app is loaded lazily."""
    return Config(
        app=APP_IMPORT_PATH,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


async def serve(settings: Settings) -> None:
    """Run the server until stopped."""
    server = Server(build_config(settings))
    await server.serve()


def main() -> None:
    settings = Settings.from_env()
    try:
        asyncio.run(serve(settings))
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logging.getLogger(__name__).critical("Application terminated unexpectedly", exc_info=True)
        raise


if __name__ == "__main__":
    main()
