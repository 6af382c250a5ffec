"""
Test Configuration Settings.

This module defines the test environment configuration using Pydantic's BaseSettings.
Pydantic automatically loads configuration from the test/.env file via env_file configuration.

Environment variables use double underscore (__) as delimiters for nested properties.
For example: TEST__DATABASE__ENABLE_MONGO_TESTS maps to test_settings.database.enable_mongo_tests
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TestDatabaseConfig(BaseModel):
    """Database configuration container for tests."""

    enable_mongo_tests: bool = Field(
        default=False,
        description="Enable MongoDB-based e2e tests (requires Docker for testcontainers)",
    )
    mongo_image: str = Field(
        default="mongo:7.0",
        description="Docker image used for the MongoDB test container",
    )
    database_name: str = Field(
        default="magic_mongo_test",
        description="Database used by e2e tests",
    )

    model_config = ConfigDict(strict=False)


# =====================================================================
# Main Test Settings Class
# =====================================================================


class TestSettings(BaseSettings):
    """
    Test environment settings model.

    All properties are automatically bound from environment variables and .env file
    in the test directory.

    Examples:
    - TEST__DATABASE__ENABLE_MONGO_TESTS -> test_settings.database.enable_mongo_tests
    - TEST__DATABASE__MONGO_IMAGE -> test_settings.database.mongo_image
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        env_prefix="TEST__",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # =====================================================================
    # Database Configuration for Tests
    # =====================================================================
    database: TestDatabaseConfig = Field(
        default_factory=TestDatabaseConfig,
        description="Database configuration (MongoDB)",
    )


_test_settings_instance: Optional[TestSettings] = None


def get_test_settings() -> TestSettings:
    """
    Get the test settings instance.

    Returns:
        TestSettings: The initialized test settings instance.
    """
    global _test_settings_instance

    if _test_settings_instance is None:
        _test_settings_instance = TestSettings()

    return _test_settings_instance


# Create singleton instance
test_settings = get_test_settings()
