from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # Detection / scanning settings
    detect_sample_lines: int = Field(100, description="Leading lines sampled by the format detector")
    progress_interval: int = Field(5000, description="Lines between progress signals")

    # Result settings
    top_talkers_limit: int = Field(20, description="Addresses kept in the top talkers list")
    conversation_limit: int = Field(100, description="Conversations kept in the result")
    conversation_retain_limit: int = Field(
        100,
        description="Packet numbers and snippets retained per conversation",
    )

    # Caching settings
    cache_enabled: bool = Field(True, description="Enable caching of protocol name lookups")
    packet_cache_size: int = Field(10000, description="Maximum entries in packet cache")

    # Logging settings
    log_level: str = Field("INFO", description="Level of the wiretext loggers")

    # Session settings
    max_sessions: int = Field(16, description="Finished sessions kept by the registry")

    class Config:
        env_prefix = "WIRETEXT_"
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


settings = get_settings()
