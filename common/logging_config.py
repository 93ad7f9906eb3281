import logging
import os
import sys
from typing import Optional, TextIO

from common.constants import ENV_LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the component package (e.g., 'cli', 'transfer')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or WARNING
        stream: Stream for the handler. Defaults to stderr so stdout only carries results

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv(ENV_LOG_LEVEL, 'WARNING')

    level = getattr(logging, log_level.upper(), logging.WARNING)

    if stream is None:
        stream = sys.stderr

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    # Repeated setup (one per CLI invocation) rebinds to the current stream
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
