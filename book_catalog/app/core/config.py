"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match a local MongoDB instance listening on the standard port.  In a
production deployment you should override these via environment
variables (for example from a ``.env`` file loaded by your process
manager).
"""

import os
from dataclasses import dataclass
from typing import Optional

from .logging_config import normalize_log_level


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Book Catalog")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Connection string of the document store and the names of the
    # database and collection holding the books.
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    database_name: str = os.getenv("DATABASE_NAME", "exercise-1")
    collection_name: str = os.getenv("COLLECTION_NAME", "information")

    # Deadline for connecting, creating the collection and seeding at
    # startup.  Every store call made while serving a request gets the
    # shorter ``request_timeout_seconds`` deadline.
    connect_timeout_seconds: float = float(os.getenv("CONNECT_TIMEOUT_SECONDS", "10"))
    request_timeout_seconds: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "5"))

    # When enabled, a unique index on the logical ``id`` is created at
    # startup and index violations on insert are reported as conflicts.
    unique_book_ids: bool = _env_flag("UNIQUE_BOOK_IDS", "false")
    # Insert the starter books on startup.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3030"))

    def __post_init__(self) -> None:
        # One level name shared by the logging setup and uvicorn.
        self.log_level = normalize_log_level(self.log_level)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
