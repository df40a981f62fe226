"""
Logging setup shared by the FastAPI and Flask entry points.
"""

from __future__ import annotations

import logging
from typing import Optional

from chart_app.core.config import Settings, get_settings


def configure_logging(app_settings: Optional[Settings] = None) -> None:
    """Apply ``LOG_LEVEL`` / ``LOG_FORMAT`` to the root logger."""
    app_settings = app_settings or get_settings()

    level = getattr(logging, app_settings.LOG_LEVEL.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=app_settings.LOG_FORMAT,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
