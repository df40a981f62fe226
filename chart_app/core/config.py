"""
Application configuration — Pydantic Settings.

Loads from .env with strict validation. Single source of truth
for all environment-dependent values.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Chart definitions shipped with the package
_DEFAULT_CHART_CONFIG = Path(__file__).resolve().parent.parent / "config" / "charts.yml"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────
    APP_NAME: str = "ChartApp"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # ── Servers ──────────────────────────────────────────────────
    API_PORT: int = 8000
    FLASK_PORT: int = 5000
    FLASK_SECRET_KEY: str = ""

    # ── Dataset API (Space and Time content queries) ─────────────
    DATASET_API_URL: str = "https://api.spaceandtime.dev/v1/public/sql/content-queries"
    # None disables the timeout: a fetch runs until it completes or fails
    DATASET_API_TIMEOUT: Optional[float] = None
    DATASET_API_BISCUITS: List[str] = []

    # ── Chart definitions ────────────────────────────────────────
    CHART_CONFIG_PATH: Path = _DEFAULT_CHART_CONFIG

    # ── Logging ──────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
