"""Configuration management for the application."""

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Registry
    seed_sample_users: bool = Field(default=False)
    # Create rejects empty name/email; update only does when this is set
    require_fields_on_update: bool = Field(default=False)

    # LLM (file summaries)
    ollama_base_url: str = Field(default="http://localhost:11434")
    llm_model: str = Field(default="granite-code:8b")
    llm_timeout_seconds: float = Field(default=120.0)

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Validate that the log level is one the logging module knows."""
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level!r}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
