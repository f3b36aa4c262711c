# src/config/logging_config.py
from __future__ import annotations

import logging

from src.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the app process."""
    logging.basicConfig(
        level=getattr(logging, level or settings.LOG_LEVEL, logging.INFO),
        format=settings.LOG_FORMAT,
    )
    # Reduce noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
