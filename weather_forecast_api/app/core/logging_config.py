"""
Logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  It is safe to call more than once; only
the first call installs handlers, later calls just adjust the level.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marker attribute set on handlers installed by ``setup_logging``.
_HANDLER_FLAG = "_weather_forecast_handler"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.  Missing parent directories are created.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if any(getattr(handler, _HANDLER_FLAG, False) for handler in logger.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_FLAG, True)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_FLAG, True)
        logger.addHandler(file_handler)

    # Requests are logged by our own middleware.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
