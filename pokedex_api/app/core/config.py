"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no environment at all, listening on port 3000 and
serving the bundled seed catalog.
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_PATH = str(Path(__file__).resolve().parents[2] / "data" / "pokedex.json")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pokedex API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    host: str = os.getenv("HOST", "0.0.0.0")

    # Hosting platforms set ``PORT``; ``NODE_PORT`` is honoured for
    # deployments configured for the previous Node.js service.
    port: int = int(os.getenv("PORT") or os.getenv("NODE_PORT") or "3000")

    # JSON file the record collection is seeded from at startup.  Changes
    # made through the API are never written back to it.
    data_path: str = os.getenv("POKEDEX_DATA_PATH", DEFAULT_DATA_PATH)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
