"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a default so the client works against a local backend
  without any setup

Usage:
    from campus_client.core.config import settings

    base = settings.api_base_url
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from campus_client.core.constants import API_TIMEOUT_DEFAULT, TOKEN_STORAGE_KEY_DEFAULT
from campus_client.core.enums import Environment


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Client configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Core settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Campus Connect",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Backend API
    api_base_url: str = Field(
        default="http://localhost:5000/api",
        description="Backend API base URL (e.g., https://campus.example.edu/api)",
    )
    auth_path: str = Field(
        default="/auth",
        description="Path of the authentication routes below api_base_url",
    )
    request_timeout: float = Field(
        default=API_TIMEOUT_DEFAULT,
        description="HTTP request timeout in seconds",
    )

    # Session persistence
    token_storage_key: str = Field(
        default=TOKEN_STORAGE_KEY_DEFAULT,
        description="Key the bearer token is persisted under",
    )
    token_store_path: Path | None = Field(
        default=None,
        description="JSON file persisting the bearer token (memory only when unset)",
    )
    login_redirect_path: str = Field(
        default="/login",
        description="Where the UI sends the user after the session is invalidated",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("auth_path")
    @classmethod
    def validate_auth_path(cls, v: str) -> str:
        """
        Normalize the auth path to a single leading slash.

        Args:
            v: Path string.

        Returns:
            str: Path starting with "/" and without trailing slash.
        """
        return "/" + v.strip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """
        Validate the request timeout is positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("request_timeout must be greater than 0")
        return v

    @property
    def auth_base_url(self) -> str:
        """
        Base URL of the authentication routes.

        Returns:
            str: api_base_url joined with auth_path.
        """
        return f"{self.api_base_url}{self.auth_path}"

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
