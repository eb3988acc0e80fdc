"""
Configuration module for the Flight Search application.

Loads environment variables (optionally from a .env file) and provides
centralized settings for the HTTP API, logging and display.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """
    Application configuration class.

    Values are read once at import time. Every setting has a default so the
    service starts with no .env file at all.

    Attributes:
        CORS_ORIGINS: Frontend origins allowed to call the API.
        LOG_LEVEL: Root logging level name.
        CURRENCY: Currency code of every flight price (display only).
        API_PREFIX: Path prefix for the JSON endpoints.
    """

    CORS_ORIGINS: List[str] = _split_csv(
        os.getenv(
            "FLIGHT_SEARCH_CORS_ORIGINS",
            "http://localhost:3000,http://localhost:3001,"
            "http://127.0.0.1:3000,http://127.0.0.1:3001",
        )
    )
    LOG_LEVEL: str = os.getenv("FLIGHT_SEARCH_LOG_LEVEL", "INFO").upper()
    CURRENCY: str = os.getenv("FLIGHT_SEARCH_CURRENCY", "BRL")
    API_PREFIX: str = os.getenv("FLIGHT_SEARCH_API_PREFIX", "/api").rstrip("/")
