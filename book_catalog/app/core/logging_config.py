"""
Logging setup for the catalog service.

``normalize_log_level`` turns the ``LOG_LEVEL`` setting into one of the
level names understood by both the ``logging`` module and uvicorn, so
an unknown value degrades to ``INFO`` everywhere instead of crashing
the server.  ``setup_logging`` attaches the catalog's handlers to the
root logger once and aligns the driver and server loggers with the
configured level.
"""

import logging
from pathlib import Path
from typing import Optional

# Level names accepted by uvicorn's ``Config(log_level=...)``.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")
DEFAULT_LOG_LEVEL = "INFO"

# Third-party loggers that follow the catalog's level.  pymongo logs
# every command at DEBUG, so it never goes below INFO.
LIBRARY_LOGGERS = {
    "pymongo": logging.INFO,
    "uvicorn": logging.NOTSET,
    "uvicorn.error": logging.NOTSET,
    "uvicorn.access": logging.NOTSET,
}


def normalize_log_level(level: Optional[str]) -> str:
    """Return ``level`` upper‑cased, or ``INFO`` when it is not a known level."""
    name = (level or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    return name if name in LOG_LEVELS else DEFAULT_LOG_LEVEL


def _numeric_level(name: str) -> int:
    # TRACE is a uvicorn-only level; the logging module treats it as DEBUG.
    return logging.DEBUG if name == "TRACE" else getattr(logging, name)


def setup_logging(level: str = DEFAULT_LOG_LEVEL, logfile: Optional[str] = None) -> None:
    """Configure the root logger and the driver/server loggers.

    Parameters
    ----------
    level : str
        Level name from the settings; normalised with
        ``normalize_log_level``.
    logfile : Optional[str]
        Path of a file receiving the same records as the console.
    """
    numeric_level = _numeric_level(normalize_log_level(level))

    for name, floor in LIBRARY_LOGGERS.items():
        logging.getLogger(name).setLevel(max(numeric_level, floor))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    if root.handlers:
        # Handlers already installed by uvicorn, pytest or an earlier create_app.
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
