"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, listening on
``localhost:8080`` with the three seed albums loaded.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "album-api")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a file that receives a copy of all log records.
    # Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address used by ``run.py`` when starting uvicorn.
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "8080"))

    # When disabled the collection starts empty instead of holding the
    # three seed albums.
    seed_albums: bool = _env_flag("SEED_ALBUMS", "true")

    @property
    def server_address(self) -> str:
        return f"{self.host}:{self.port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
