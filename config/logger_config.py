"""Centralized logging configuration."""

import sys

from loguru import logger

from config.defaults import LOG_LEVEL


log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}::{function}:{line}</>',
        '{message}',
    )
)

logger.remove()  # Drop loguru's default handler so only our format is emitted
logger.add(sys.stderr, format=log_format, level=LOG_LEVEL)

__all__ = ["logger"]
