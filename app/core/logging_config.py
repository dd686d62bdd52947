"""
Logging setup shared by the API process and the scripts.

Usage:
    from app.core.logging_config import setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)
"""
import logging
import sys
from typing import Optional, Union

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that flood INFO output with per-statement / per-request lines
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "passlib")


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure the root logger.
    
    Args:
        level: Logging level name or number (defaults to settings.LOG_LEVEL)
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
