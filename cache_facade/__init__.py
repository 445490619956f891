"""
Cache facade package.

Provides a namespaced get/set/delete facade with read-through memoization
(remember) over a pluggable key-value store.
"""

from .facade import CacheFacade
from .factory import create_facade, create_store
from .stores import CacheStore, MemoryStore, RedisStore, StoreResult

__all__ = [
    "CacheFacade",
    "CacheStore",
    "MemoryStore",
    "RedisStore",
    "StoreResult",
    "create_facade",
    "create_store",
]
