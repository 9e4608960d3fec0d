"""
Centralized logging configuration with colored output

Every module logs through a child of the 'route53_api' logger, so one call to
configure_logging() sets the level and handlers for the whole package.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog


PACKAGE_LOGGER = "route53_api"
LOGS_DIR = Path("logs")

CONSOLE_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(level: int) -> logging.Handler:
    handler = colorlog.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(colorlog.ColoredFormatter(
        CONSOLE_FORMAT,
        reset=True,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        },
        style='%'
    ))
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    LOGS_DIR.mkdir(exist_ok=True)
    handler = logging.FileHandler(LOGS_DIR / log_file, encoding='utf-8')
    handler.setLevel(logging.DEBUG)  # Always log everything to file
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Attach colored console output (and optionally a log file) to a logger.

    Args:
        name: Logger name; defaults to the package logger
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (saved in logs/ directory)
        console: Whether to output to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if console:
        logger.addHandler(_console_handler(logger.level))

    if log_file:
        logger.addHandler(_file_handler(log_file))

    return logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Set the package-wide level, e.g. from Settings.log_level.

    Console handlers follow the new level; a file handler is added once.
    """
    logger = setup_logger(PACKAGE_LOGGER, level=level)
    numeric_level = getattr(logging, level.upper())

    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric_level)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        logger.addHandler(_file_handler(log_file))

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger that reports through the package logger.

    Args:
        name: Module name (typically __name__); names outside the package
            are nested under it, e.g. 'cli' -> 'route53_api.cli'

    Returns:
        Logger instance
    """
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        setup_logger(PACKAGE_LOGGER)

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)
