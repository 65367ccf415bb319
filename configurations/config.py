"""Configuration settings for the waste disposal matching engine."""
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


class Config:
    # Geodesy
    EARTH_RADIUS_KM: float = 6371.0

    # Search defaults (unset means no radius filter / unlimited results)
    DEFAULT_SEARCH_RADIUS_KM: Optional[float] = _optional_float("DEFAULT_SEARCH_RADIUS_KM")
    DEFAULT_MAX_RESULTS: Optional[int] = _optional_int("DEFAULT_MAX_RESULTS")

    # Reference data sources
    TAXONOMY_PATH: str = os.getenv("TAXONOMY_PATH", "")
    CATALOG_CSV_PATH: str = os.getenv("CATALOG_CSV_PATH", "")
    CATALOG_API_URL: str = os.getenv("CATALOG_API_URL", "")
    CATALOG_API_TOKEN: str = os.getenv("CATALOG_API_TOKEN", "")
    CATALOG_API_TIMEOUT_SECONDS: int = int(os.getenv("CATALOG_API_TIMEOUT_SECONDS", "30"))

    # Export settings
    EXPORT_DIR: str = os.getenv("EXPORT_DIR", "output")

    # API settings
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("API_PORT", "8080"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
