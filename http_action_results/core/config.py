"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        include_error_detail: Expose exception message, type and stack trace
            in 500 responses built for unhandled errors. Must be False in
            production.
        response_encoding: Character encoding of JSON response bodies.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "HttpActionResults"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    include_error_detail: bool = False
    response_encoding: str = "utf-8"


settings = Settings()
