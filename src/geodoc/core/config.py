"""
Configuration settings for geodoc.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        environment: Deployment environment, selects the default log level
        log_level: Log level name used by setup_logging when none is passed
        json_indent: Indentation used when writing documents (None = compact)
        json_sort_keys: Whether to sort object keys when writing documents
        json_ensure_ascii: Whether to escape non-ASCII characters when writing
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEODOC_",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Optional[str] = None

    # Text output
    json_indent: Optional[int] = Field(default=None, ge=0)
    json_sort_keys: bool = False
    json_ensure_ascii: bool = False


# Global settings instance
settings = Settings()
