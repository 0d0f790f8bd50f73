"""Centralized logging configuration."""

import sys

from loguru import logger

from reservation_frontend.app.core.config import settings


log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}::{function}:{line}</>",
        "{message}",
    )
)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default handler with a stdout sink at the configured level."""
    logger.remove()
    logger.add(sys.stdout, format=log_format, level=(level or settings.LOG_LEVEL).upper())
