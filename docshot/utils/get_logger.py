import logging

from . import logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not logger._CONFIGURED:
        logger.configure_logging()

    return logging.getLogger(f"docshot.{name}")
