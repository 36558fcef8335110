"""
Logging setup for applications embedding physkit.

Library modules only create module-level loggers and emit DEBUG records;
handlers are attached here, on request.
"""

import logging
import sys

PACKAGE_LOGGER = "physkit"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'physkit' logger.

    Existing handlers are removed first, so repeated calls do not duplicate
    output.

    Args:
        level: Logging level (e.g. logging.DEBUG to see iteration limits
            and beam reaction records)
        log_file: Optional path; records are also written there (overwritten)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
