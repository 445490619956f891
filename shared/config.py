"""
Shared configuration management for the cache facade.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheConfig(BaseSettings):
    """Cache facade configuration, read from CACHE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CACHE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="info")

    # Store backend
    backend: str = Field(default="memory", description="memory or redis")
    redis_url: str = Field(default="redis://localhost:6379/0")

    # Facade
    domain: str = Field(default="cached", min_length=1)
    single_flight: bool = Field(default=False)

    # Observability
    metrics_enabled: bool = Field(default=True)


def get_config(**overrides) -> CacheConfig:
    """Get cache configuration, applying explicit overrides over the environment."""
    return CacheConfig(**overrides)
