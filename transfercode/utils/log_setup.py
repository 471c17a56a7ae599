"""
Transfer Code Diagnostics - Logging Setup

Configures loguru sinks from Settings:
- stderr sink with LOG_FORMAT / LOG_LEVEL
- rotating file sink when LOG_FILE_PATH is set
"""

import sys
from typing import List, Optional

from loguru import logger

from transfercode.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> List[int]:
    """
    Replace loguru's default sink with the configured ones.

    Args:
        settings: Settings to use (default: cached get_settings())

    Returns:
        List[int]: loguru handler ids, so callers can remove them again

    Raises:
        InvalidConfigError: LOG_LEVEL is not a loguru level

    Example:
        >>> from transfercode.utils.log_setup import setup_logging
        >>> handler_ids = setup_logging()
    """
    settings = settings or get_settings()
    settings.validate_log_level()
    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()

    logger.remove()
    handler_ids = [
        logger.add(sys.stderr, format=settings.LOG_FORMAT, level=level),
    ]

    if settings.LOG_FILE_PATH:
        handler_ids.append(
            logger.add(
                settings.LOG_FILE_PATH,
                format=settings.LOG_FORMAT,
                level=level,
                rotation=settings.LOG_ROTATION,
                retention=settings.LOG_RETENTION,
                enqueue=True,
            )
        )

    logger.debug(f"[Logging] Configured {len(handler_ids)} sink(s) at level {level}")
    return handler_ids
