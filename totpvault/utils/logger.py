"""
Centralized logging configuration for TotpVault

Modules log through logging.getLogger(__name__); this module attaches a
single console handler to the package logger. Secrets, keys and codes are
never passed to the logger.
"""
import logging
import os

LOGGER_NAME = "totpvault"
LOG_LEVEL_ENV = "TOTPVAULT_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str = LOGGER_NAME, log_level: str = "WARNING") -> logging.Logger:
    """
    Set up and configure the package logger

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # Only add a handler once, even if called repeatedly
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get existing logger or create new one

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        log_level = os.getenv(LOG_LEVEL_ENV, "WARNING")
        logger = setup_logger(name, log_level)
    return logger
