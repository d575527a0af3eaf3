# File: backend/command_hooks/config.py
# Purpose: Environment-driven settings for the hook command runner
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runner settings loaded from the environment (and an optional .env file).
    Unknown keys are ignored so the runner can share an env with its host.
    """
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    APP_NAME: str = "command_hooks"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Same flag name the hook framework uses to switch on verbose tracing
    OPENCODE_HOOKS_DEBUG: bool = False

    # Execution Configuration
    HOOKS_TRUNCATE_LIMIT: int = Field(30_000, gt=0)
    HOOKS_SHELL: str = "sh"

    @property
    def effective_log_level(self) -> str:
        """Debug mode always wins over LOG_LEVEL"""
        return "DEBUG" if self.OPENCODE_HOOKS_DEBUG else self.LOG_LEVEL.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
