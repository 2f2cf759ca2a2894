"""
Runtime configuration.

Values are read from the environment after loading the project's .env file.

Environment variables:
- LOG_LEVEL: Logging level name for the API and scripts (default: INFO)
- API_CORS_ORIGINS: Comma-separated list of allowed origins (default: *)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Look for .env in the project root
env_path = Path(__file__).parent / ".env"
load_dotenv(dotenv_path=env_path)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
API_CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv("API_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point (API app or script)."""
    resolved = (level or LOG_LEVEL).upper()
    if resolved not in logging.getLevelNamesMapping():
        raise RuntimeError(
            f"Invalid LOG_LEVEL: {resolved}. "
            "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


__all__ = [
    "API_CORS_ORIGINS",
    "LOG_LEVEL",
    "configure_logging",
]
