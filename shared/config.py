"""
App settings for the Hello Cities function app.

Values come from the Function App's application settings (environment
variables, matched case-insensitively on the field name). For local runs a
`.env` file next to the app is read as well; real environment variables always
win over it.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_SWAPI_URL = "https://swapi.dev/api/people/1/"
DEFAULT_APP_SETTINGS_FILE = "appsettings.json"


class ConfigurationError(Exception):
    """Raised when app settings or the logging settings file are invalid."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class AppSettings(BaseSettings):

    """Runtime configuration consumed by the functions in this app"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    swapi_url: str = Field(default=DEFAULT_SWAPI_URL, min_length=1, description="Public demo endpoint called by InvokeSwapiActivity")
    http_timeout_seconds: float = Field(default=100.0, gt=0, description="Timeout applied to outbound HTTP requests")
    app_settings_file: str = Field(default=DEFAULT_APP_SETTINGS_FILE, description="Optional JSON file holding the Logging section")

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "AppSettings":
        """
        Build settings from the current environment.
        Unset or empty variables fall back to the field defaults.
        """
        try:
            return cls(_env_file=env_file)
        except ValidationError as e:
            logger.error(f"[AppSettings] Invalid application settings: {e}")
            raise ConfigurationError(f"Invalid application settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Process-wide settings, loaded on first use."""
    return AppSettings.from_env()
