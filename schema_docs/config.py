"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Generator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SCHEMA_DOCS_",
        case_sensitive=True,
        extra="ignore",
    )

    # Input layout (relative to the working directory)
    SCHEMAS_DIR: str = "src/schemas"
    SCHEMA_SUFFIX: str = ".json"

    # Output
    CHANGELOG_FILENAME: str = "CHANGELOG.md"
    SUMMARY_PATH: str = "README.md"
    SUMMARY_TITLE: str = "Analytics Data Schemas"
    SUMMARY_DESCRIPTION: str = (
        "This document contains the latest version of each analytic Postgres view."
    )

    # Parsing
    SKIP_INVALID_FILES: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Application
    APP_NAME: str = "Schema Docs Generator"
    APP_VERSION: str = "1.0.0"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
