"""Logging setup for the call alert tools."""
import logging
import sys

from .config import Settings


def configure_logging(settings: Settings, *, logger_name: str = "call_alerts") -> logging.Logger:
    """Configure the root logger and return the application logger.

    Args:
        settings: Settings carrying the log level name.
        logger_name: Name of the logger to retrieve.

    Returns:
        Configured logger instance.
    """

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.debug("Logging configured with level %s", logging.getLevelName(log_level))
    return logger
