"""
Configuration Settings.

This module defines the library configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# MongoDB Client Configuration Models
# =====================================================================


class MongoClientConfig(BaseModel):
    """MongoDB client configuration."""

    url: str = Field(
        default="mongodb://localhost:27017", alias="MAGIC_MONGO_URL", description="MongoDB connection URL"
    )
    app_name: str = Field(
        default="magic-mongo", alias="MAGIC_MONGO_APP_NAME", description="Application name reported to the server"
    )
    server_selection_timeout_ms: int = Field(
        default=30000,
        alias="MAGIC_MONGO_SERVER_SELECTION_TIMEOUT_MS",
        description="How long the driver waits to find an available server",
    )
    uuid_representation: str = Field(
        default="standard",
        alias="MAGIC_MONGO_UUID_REPRESENTATION",
        description="BSON representation used for native uuid.UUID values",
    )

    model_config = {"populate_by_name": True}

    def to_client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``pymongo.MongoClient`` derived from this configuration."""
        return {
            "appname": self.app_name,
            "serverSelectionTimeoutMS": self.server_selection_timeout_ms,
            "uuidRepresentation": self.uuid_representation,
        }


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="MAGIC_MONGO_LOG_LEVEL", description="Log level")
    format: str = Field(
        default="detailed", alias="MAGIC_MONGO_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(default="logs", alias="MAGIC_MONGO_LOG_FILE_DIR", description="Directory for log files")
    enable_file: bool = Field(
        default=False, alias="MAGIC_MONGO_ENABLE_FILE_LOGGING", description="Write logs to a file as well"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Library settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # MongoDB Configuration
    # =====================================================================
    mongo_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL, optionally naming a default database",
        alias="MAGIC_MONGO_URL",
    )
    app_name: str = Field(
        default="magic-mongo",
        description="Application name reported to the server",
        alias="MAGIC_MONGO_APP_NAME",
    )
    server_selection_timeout_ms: int = Field(
        default=30000,
        description="How long the driver waits to find an available server",
        alias="MAGIC_MONGO_SERVER_SELECTION_TIMEOUT_MS",
    )
    uuid_representation: str = Field(
        default="standard",
        description="BSON representation used for native uuid.UUID values",
        alias="MAGIC_MONGO_UUID_REPRESENTATION",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MAGIC_MONGO_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format (simple, detailed, json)",
        alias="MAGIC_MONGO_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for log files",
        alias="MAGIC_MONGO_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write logs to a file in addition to the console",
        alias="MAGIC_MONGO_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def client(self) -> MongoClientConfig:
        """Get MongoDB client configuration from environment variables."""
        return MongoClientConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()


def get_settings(reload: bool = False) -> Settings:
    """Return the shared settings instance.

    Args:
        reload: Re-read the environment and replace the shared instance

    Returns:
        The current Settings
    """
    global settings
    if reload:
        settings = Settings()
    return settings


def client_kwargs_with_defaults(
    overrides: Optional[Dict[str, Any]] = None, defaults: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Merge caller supplied ``MongoClient`` options over defaults.

    Args:
        overrides: Options passed explicitly by the caller
        defaults: Base options; the shared settings are used when omitted

    Returns:
        Options for ``pymongo.MongoClient``
    """
    overrides = dict(overrides or {})
    if defaults is None:
        defaults = get_settings().client.to_client_kwargs()
    # MongoClient option names are case-insensitive
    explicit = {key.lower() for key in overrides}
    kwargs = {key: value for key, value in defaults.items() if key.lower() not in explicit}
    kwargs.update(overrides)
    return kwargs
