"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with no configuration at all and listens on port 4000.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_SEED_FILE = str(Path(__file__).resolve().parent.parent / "data" / "jokes.json")


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Jokes API")
    api_version: str = os.getenv("API_VERSION", "1.0.3")
    description: str = "Documentation of Jokes API"
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` (the default) allows any origin.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )

    # JSON file holding the jokes the store is seeded with at startup and
    # restored to on reset.
    seed_file: str = os.getenv("JOKES_SEED_FILE", DEFAULT_SEED_FILE)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
