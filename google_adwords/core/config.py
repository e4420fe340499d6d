"""
Configuration settings for the google-adwords library.

This module provides a centralized way to access configuration settings
from environment variables using Pydantic's BaseSettings.
"""
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

from google_adwords.__version__ import __version__ as package_version


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    The five GOOGLE_ADWORDS_* credential values have no defaults; they are
    checked when the session is built, not when settings are loaded.
    """
    # Google Ads credentials
    GOOGLE_ADWORDS_MANAGER_ID: Optional[str] = None
    GOOGLE_ADWORDS_CLIENT_ID: Optional[str] = None
    GOOGLE_ADWORDS_CLIENT_SECRET: Optional[str] = None
    GOOGLE_ADWORDS_REFRESH_TOKEN: Optional[str] = None
    GOOGLE_ADWORDS_DEVELOPER_TOKEN: Optional[str] = None

    # Google Ads client library
    GOOGLE_ADWORDS_USE_PROTO_PLUS: bool = True
    GOOGLE_ADWORDS_API_LOG_LEVEL: str = "ERROR"
    GOOGLE_ADWORDS_PAGE_SIZE: int = 800

    # Rate limit retries
    GOOGLE_ADWORDS_MAX_RETRIES: int = 5
    GOOGLE_ADWORDS_DEFAULT_RETRY_AFTER: float = 30.0  # seconds
    GOOGLE_ADWORDS_MAX_BACKOFF: float = 600.0  # seconds

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Application settings
    PROJECT_NAME: str = "google-adwords"
    VERSION: str = package_version

    @field_validator("GOOGLE_ADWORDS_API_LOG_LEVEL", "LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> str:
        """
        Upper-case log level names so "info" and "INFO" are equivalent.

        Args:
            v: The raw log level value

        Returns:
            str: The upper-cased level name
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("GOOGLE_ADWORDS_MAX_RETRIES")
    @classmethod
    def check_max_retries(cls, v: int) -> int:
        """Reject negative retry counts."""
        if v < 0:
            raise ValueError("GOOGLE_ADWORDS_MAX_RETRIES must be zero or positive")
        return v

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get the library settings.

    Settings are loaded once on first call and cached; use reload_settings()
    to pick up environment changes.

    Returns:
        Settings: The settings instance

    Example:
        >>> from google_adwords.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.GOOGLE_ADWORDS_MAX_RETRIES)
        5
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings by clearing the cache and creating a new instance.

    Returns:
        Settings: The newly loaded settings instance
    """
    get_settings.cache_clear()
    return get_settings()
