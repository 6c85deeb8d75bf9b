"""Resolver settings using pydantic-settings."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Resolver configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HELM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    home: Path = Field(
        default=Path.home() / ".helm",
        description="Helm home directory holding repository config and caches",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def archive_cache_dir(self) -> Path:
        """Directory where downloaded chart archives are kept."""
        return self.home / "cache" / "archive"

    @property
    def index_cache_dir(self) -> Path:
        """Directory that relative repository index paths resolve against."""
        return self.home / "repository" / "cache"

    @property
    def repositories_file(self) -> Path:
        """Default location of repositories.yaml."""
        return self.home / "repository" / "repositories.yaml"


# Global settings instance - lazy loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
