"""Start the Weather Forecast API.

Configuration such as ``DATABASE_URL``, ``LOG_LEVEL``, ``API_HOST`` and
``API_PORT`` is read from environment variables.  Run from the project
root::

    python run.py
"""

from weather_forecast_api.app.server import main

if __name__ == "__main__":
    main()
