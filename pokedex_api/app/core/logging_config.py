"""
Logging setup for the Pokedex service.

Everything, uvicorn's own ``uvicorn.error`` and ``uvicorn.access``
records included, goes through the root logger so server and
application lines share one format.  ``run.py`` starts uvicorn with
``log_config=None`` for that reason.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def route_server_loggers(level: int) -> None:
    """Make uvicorn's loggers hand their records to the root handlers."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    # Only the first call installs handlers; create_app runs once per test.
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    route_server_loggers(numeric_level)
    if root.handlers:
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
