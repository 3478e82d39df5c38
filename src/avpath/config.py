"""
Configuration management using pydantic-settings.

Loads configuration from AVPATH_* environment variables and .env files.
Every setting has a default, so the library works unconfigured.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from avpath.exceptions import ConfigurationError
from avpath.types import AuthorityStyle


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Optional:
        AVPATH_AUTHORITY_STYLE: unc | plain, how file://host/path is read
        AVPATH_SUBPATH_MAX_LENGTH: Default truncation for cache subpaths (0 = off)
        AVPATH_APP_NAME: Folder name under the documents directory
        AVPATH_DATA_DIR: Override for the data directory
        AVPATH_DOCUMENTS_DIR: Override for the user documents directory
        AVPATH_TEMP_DIR: Override for where temp file paths are generated
        AVPATH_LOG_LEVEL: Logging level
    """

    model_config = SettingsConfigDict(
        env_prefix="AVPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    AUTHORITY_STYLE: AuthorityStyle = Field(
        default_factory=AuthorityStyle.platform_default,
        description="How the authority of file://host/path maps to a path",
    )

    SUBPATH_MAX_LENGTH: int = Field(
        default=0, ge=0, description="Default max length for URI subpaths (0 disables)"
    )

    APP_NAME: str = Field(
        default="aardvark", description="Application folder under the documents dir"
    )

    # Directories
    DATA_DIR: Path | None = Field(default=None, description="Data directory")
    DOCUMENTS_DIR: Path | None = Field(
        default=None, description="User documents directory"
    )
    TEMP_DIR: Path | None = Field(default=None, description="Temp file directory")

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @property
    def authority_style(self) -> AuthorityStyle:
        """Get authority style (lowercase alias)."""
        return self.AUTHORITY_STYLE

    @property
    def subpath_max_length(self) -> int:
        """Get subpath max length (lowercase alias)."""
        return self.SUBPATH_MAX_LENGTH

    @field_validator("APP_NAME")
    @classmethod
    def validate_app_name(cls, v: str) -> str:
        """APP_NAME becomes a single path segment."""
        v = v.strip()
        if not v:
            raise ValueError("APP_NAME must not be empty")
        if "/" in v or "\\" in v:
            raise ValueError("APP_NAME must not contain path separators")
        return v

    def display(self) -> dict[str, str | int | None]:
        """Return settings as plain values for display."""

        def as_str(value: Path | None) -> str | None:
            return str(value) if value is not None else None

        return {
            "AUTHORITY_STYLE": self.AUTHORITY_STYLE.value,
            "SUBPATH_MAX_LENGTH": self.SUBPATH_MAX_LENGTH,
            "APP_NAME": self.APP_NAME,
            "DATA_DIR": as_str(self.DATA_DIR),
            "DOCUMENTS_DIR": as_str(self.DOCUMENTS_DIR),
            "TEMP_DIR": as_str(self.TEMP_DIR),
            "LOG_LEVEL": self.LOG_LEVEL,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings instance loaded from environment.

    Raises:
        ConfigurationError: If a setting is present but invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            "Invalid avpath configuration", context={"fields": fields}
        ) from e


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
