"""Configuration management using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..blogger.client import DEFAULT_BASE_URL

# Project root, so .env is found regardless of the working directory
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Blogger API
    blogger_access_token: str = Field(default="", description="OAuth 2.0 bearer token")
    blogger_api_key: str = Field(default="", description="API key, sent as the key parameter")
    blogger_blog_id: str = Field(default="", description="Blog the samples operate on")
    blogger_base_url: str = Field(default=DEFAULT_BASE_URL, description="Blogger API root URL")
    request_timeout_seconds: float = Field(default=30.0, description="HTTP request timeout")

    # Mock Mode (for trying the samples without real API access)
    use_mock_blogger: bool = Field(
        default=False, description="Use the in-memory mock client instead of the real API"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
