"""
Configuration and settings for the Forever Family backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT_ENV = "development"


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")

    # HTTP listener
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Shared secret expected in the x-admin-key header
    admin_key: Optional[str] = Field(default=None)

    # "development" turns the admin check off entirely
    app_env: str = Field(default="production")

    # Flat-file persistence and the static site
    data_dir: str = Field(default="data")
    site_dir: str = Field(default="site")

    # Development toggles
    use_in_memory_store: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @property
    def permissive(self) -> bool:
        return self.app_env == DEVELOPMENT_ENV


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
