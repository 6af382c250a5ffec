"""
Logging Configuration Module.

This module provides centralized logging configuration for magic-mongo.
Nothing is configured at import time beyond a ``NullHandler`` on the package
logger; applications opt in by calling :func:`setup_logging`.

Features:
- Configurable log levels per module
- Console and file logging
- Structured logging with JSON format support
"""

import logging
from pathlib import Path
from typing import Optional


def _get_logging_config():
    """Get logging configuration from settings model.

    This function is used to defer settings import until needed,
    avoiding circular imports during module initialization.
    """
    from magic_mongo.core.config import get_settings

    config = get_settings().logging
    return {
        "log_level": config.level.upper(),
        "log_format": config.format,
        "log_file_dir": config.file_dir,
        "enable_file_logging": config.enable_file,
    }


# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FILE_NAME = "magic_mongo.log"


# Module-specific log levels
MODULE_LOG_LEVELS = {
    # Library modules
    "magic_mongo": "INFO",
    "magic_mongo.database": "INFO",
    "magic_mongo.builders": "INFO",
    "magic_mongo.codecs": "INFO",
    # Third-party libraries (reduce noise)
    "pymongo": "WARNING",
    "pymongo.command": "WARNING",
    "pymongo.connection": "WARNING",
    "pymongo.serverSelection": "WARNING",
}


def _format_for(name: str) -> str:
    if name == "json":
        return JSON_FORMAT
    if name == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
) -> None:
    """
    Configure logging for an application using magic-mongo.

    Args:
        log_level: Override configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override configured format (simple, detailed, json)
        enable_file: Override whether file logging is enabled
    """
    config = _get_logging_config()
    level = (log_level or config["log_level"]).upper()
    fmt = log_format or config["log_format"]
    file_logging = config["enable_file_logging"] if enable_file is None else enable_file

    # Create formatter
    formatter = logging.Formatter(_format_for(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (if enabled)
    if file_logging:
        log_dir = Path(config["log_file_dir"])
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Configure module-specific log levels
    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)
    # An explicit DEBUG request should reach the library loggers too
    if level == "DEBUG":
        logging.getLogger("magic_mongo").setLevel(logging.DEBUG)
        for module_name in MODULE_LOG_LEVELS:
            if module_name.startswith("magic_mongo."):
                logging.getLogger(module_name).setLevel(logging.DEBUG)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)


logging.getLogger("magic_mongo").addHandler(logging.NullHandler())
