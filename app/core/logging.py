"""
Logging configuration.
"""
import logging
import sys

from app.core.config import settings


def setup_logging() -> None:
    """
    Setup application logging.

    Called once by the application factory; the level comes from
    ``settings.LOG_LEVEL``.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.
    """
    return logging.getLogger(name)
