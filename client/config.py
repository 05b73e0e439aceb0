# =============================================================================
# client/config.py - Directory Client Settings
# =============================================================================
# Loads the client's configuration with pydantic-settings.
#
# Usage:
#   from client.config import get_client_settings
#   print(get_client_settings().API_URL)
#
# API_URL may also be given as VITE_API_URL, the name used by the browser
# build, so one .env file serves both front ends.
# =============================================================================

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for talking to the User Directory Service."""

    API_URL: str = Field(
        default="http://localhost:5000",
        validation_alias=AliasChoices("API_URL", "VITE_API_URL"),
        description="Base URL of the User Directory Service"
    )

    REQUEST_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for each request"
    )

    # -------------------------------------------------------------------------
    # UI Timings
    # -------------------------------------------------------------------------

    SUCCESS_BANNER_SECONDS: float = Field(
        default=3.0,
        ge=0,
        description="How long the 'user added' indicator stays visible"
    )

    DELETE_ANIMATION_SECONDS: float = Field(
        default=0.3,
        ge=0,
        description="Delay between marking a user as deleting and removing it"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def api_base_url(self) -> str:
        """API_URL without a trailing slash."""
        return self.API_URL.rstrip("/")


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached ClientSettings instance."""
    return ClientSettings()
