"""This module defines the configuration management for the application.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files. This ensures
all required configuration is present and valid at startup.
"""

from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONTENT_PATH = Path(__file__).resolve().parent.parent / "web" / "content"


class Config(BaseSettings):
    """A Pydantic model for managing application settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    SITE_TITLE: str = "Portfólio"

    DEFAULT_LANGUAGE: str = "pt"
    SUPPORTED_LANGUAGES: list[str] = ["pt", "en"]

    TRANSLATIONS_FILE: Path = CONTENT_PATH / "translations.json"
    PARTIALS_DIR: Path = CONTENT_PATH / "partials"
    FRAGMENT_BASE_URL: str | None = None
    HTTP_TIMEOUT_SECONDS: float = 10.0

    LANGUAGE_COOKIE_NAME: str = "lang"
    LANGUAGE_COOKIE_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 365
    SCROLL_COOKIE_NAME: str = "scrollTo"
    SCROLL_WAIT_TIMEOUT_SECONDS: float = 5.0

    @model_validator(mode="after")
    def check_default_language(self) -> "Config":
        """Ensures the default language is one of the supported languages.

        Returns:
            The validated Config object.

        Raises:
            ValueError: If the default language is not supported.
        """
        if self.DEFAULT_LANGUAGE not in self.SUPPORTED_LANGUAGES:
            raise ValueError(
                f"DEFAULT_LANGUAGE '{self.DEFAULT_LANGUAGE}' is not in SUPPORTED_LANGUAGES {self.SUPPORTED_LANGUAGES}"
            )
        return self


class ConfigProvider:
    """A provider class that acts as a factory for the application's configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables. This ensures the configuration is always fresh.

        Returns:
            A new, validated Config object.
        """
        return Config()
