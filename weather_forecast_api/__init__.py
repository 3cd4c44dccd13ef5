"""
Top-level package for the Weather Forecast API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``weather_forecast_api.app.main:app``.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
