"""Application configuration using Pydantic Settings.

This module defines process-level configuration loaded from environment variables.
Per-gallery options live in vidshelf.config.gallery.LoaderConfig.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration.

    All configuration is loaded from environment variables or .env file.
    Validation happens automatically via Pydantic.

    Example:
        >>> config = Config()
        >>> print(config.app_name)
        'VidShelf'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================
    # Application Settings
    # ============================================
    app_name: str = Field(default="VidShelf", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # ============================================
    # HTTP Settings
    # ============================================
    site_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL that relative catalog endpoints resolve against",
    )
    http_timeout: float = Field(default=30.0, description="HTTP timeout in seconds", gt=0)

    @field_validator("site_base_url")
    @classmethod
    def validate_site_base_url(cls, v: str) -> str:
        """Ensure the base URL is absolute.

        Args:
            v: Base URL string

        Returns:
            Validated base URL

        Raises:
            ValueError: If URL has no http(s) scheme
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("site_base_url must start with http:// or https://")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


# =============================================================================
# Singleton accessor
# =============================================================================

_config: Config | None = None


def get_config() -> Config:
    """Get the global Config singleton.

    Returns:
        The global Config instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
