"""
Logging setup shared by the application and the uvicorn server.

All records, including uvicorn's startup and access lines, go through
the root logger and are rendered with :data:`LOG_FORMAT`.  ``run.py``
starts uvicorn with ``log_config=None`` so that the server does not
install its own handlers on top of these.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that uvicorn configures by default; they are re-routed to root.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def parse_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def route_server_loggers() -> None:
    """Drop uvicorn's own handlers and let its records propagate to root."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        for handler in list(server_logger.handlers):
            server_logger.removeHandler(handler)
        server_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once and route server logs through it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall
        back to ``INFO``.
    logfile : Optional[str]
        Optional file receiving a copy of every record.
    """
    route_server_loggers()

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a second ``create_app``.
        return

    root.setLevel(parse_level(level))
    for handler in _build_handlers(logfile):
        root.addHandler(handler)
