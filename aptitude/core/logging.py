"""
Logging configuration - Aptitude Scoring Engine
aptitude/core/logging.py

Scoring modules log through ``structlog.get_logger(__name__)`` with an
event name and key/value context. ``configure_logging`` wires the renderer
and level from Settings.
"""

import logging
from typing import Optional

import structlog

from aptitude.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog processors and the minimum log level."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL)

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
