"""
Builders for stores and facades from configuration.
"""

from typing import Optional

from shared.config import CacheConfig, get_config
from shared.errors import ConfigurationError
from shared.logging import configure_logging, get_logger
from shared.metrics import CacheMetrics, get_cache_metrics
from .facade import CacheFacade
from .stores.base import CacheStore
from .stores.memory import MemoryStore
from .stores.redis_store import RedisStore

logger = get_logger("cache_facade.factory")


def create_store(config: CacheConfig) -> CacheStore:
    """Create the store selected by ``config.backend``."""
    backend = config.backend.lower()
    if backend == "redis":
        return RedisStore(config.redis_url)
    if backend == "memory":
        return MemoryStore()
    raise ConfigurationError(
        f"Unknown cache backend: {config.backend}",
        {"backend": config.backend, "supported": ["memory", "redis"]}
    )


def create_facade(
    config: Optional[CacheConfig] = None,
    metrics: Optional[CacheMetrics] = None,
) -> CacheFacade:
    """Create a facade wired to the configured store."""
    config = config or get_config()
    configure_logging("cache_facade", config.log_level)
    if metrics is None and config.metrics_enabled:
        metrics = get_cache_metrics()

    facade = CacheFacade(
        create_store(config),
        config.domain,
        metrics=metrics,
        single_flight=config.single_flight,
    )
    logger.info(
        "Cache facade created",
        backend=config.backend,
        domain=config.domain,
        single_flight=config.single_flight
    )
    return facade
