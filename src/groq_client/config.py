"""Configuration management - environment and .env driven."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHAT_COMPLETION_URL = "https://api.groq.com/openai/v1/chat/completions"


class Settings(BaseSettings):
    """Client settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    groq_api_key: str = Field(default="", description="Bearer credential for the Groq API")
    groq_chat_completion_url: str = Field(
        default=DEFAULT_CHAT_COMPLETION_URL,
        description="Chat completion endpoint",
    )
    log_level: str = Field(default="INFO", description="Log level for the command-line entry point")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
