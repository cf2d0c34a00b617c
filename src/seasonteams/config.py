"""Application configuration with environment validation.

Usage:
    from seasonteams.config import get_settings

    settings = get_settings()
    print(settings.supabase_url)
    print(settings.environment)

Settings are read from the process environment and from a ``.env`` file in
the working directory or the project root.
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> Path | None:
    """Find .env file, checking the current dir first, then the project root."""
    if Path(".env").exists():
        return Path(".env")
    # config.py -> seasonteams -> src -> project_root
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        return env_file
    return None


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.LOCAL

    # Supabase
    supabase_url: str = Field(description="Supabase project URL")
    supabase_key: SecretStr = Field(description="Supabase anon/public key")
    supabase_service_role_key: SecretStr | None = Field(
        default=None, description="Supabase service role key (bypasses RLS, for CLI/admin)"
    )

    # Where denied HTML requests are sent
    home_path: str = Field(default="/", description="Default view for redirects")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log output format")

    @property
    def is_local(self) -> bool:
        return self.environment == Environment.LOCAL

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    To reload, clear the cache: ``get_settings.cache_clear()``.
    """
    return Settings()
