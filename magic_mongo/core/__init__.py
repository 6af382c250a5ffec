"""
Core utilities and configuration for magic-mongo.

This package provides the ambient functionality shared by the rest of the
library: settings, logging configuration and error types.
"""

from magic_mongo.core.config import Settings, get_settings, settings
from magic_mongo.core.errors import (
    CodecConfigurationError,
    CollectionNotLoadedError,
    DatabaseNotLoadedError,
    DocumentNotFoundError,
    EmptyBuilderError,
    MagicMongoError,
    MissingDatabaseNameError,
)
from magic_mongo.core.logging_config import get_logger, setup_logging

__all__ = [
    "CodecConfigurationError",
    "CollectionNotLoadedError",
    "DatabaseNotLoadedError",
    "DocumentNotFoundError",
    "EmptyBuilderError",
    "MagicMongoError",
    "MissingDatabaseNameError",
    "Settings",
    "get_logger",
    "get_settings",
    "settings",
    "setup_logging",
]
