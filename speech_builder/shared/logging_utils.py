"""
Logging setup for speech builder components.
"""
import logging

from .config import config

LOG_FORMAT = "%(asctime)s - {component} - %(levelname)s - %(message)s"


def setup_logging(component_name: str, log_level: str | None = None) -> logging.Logger:
    """
    Return the logger for a builder component, attaching one stream handler.

    Args:
        component_name: Logger name, also shown in each record
        log_level: Level name; defaults to the configured ``log_level``
            (SSML_LOG_LEVEL or ``builder.log_level`` in the YAML file)

    Returns:
        Configured logger instance
    """
    level_name = (log_level or config.get("log_level", "WARNING")).upper()
    logger = logging.getLogger(component_name)
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT.format(component=component_name)))
        logger.addHandler(handler)

    return logger
