"""
Store collaborators for the cache facade.

The facade talks to stores only through the CacheStore contract; an
in-process MemoryStore and a Redis-backed RedisStore are provided.
"""

from .base import CacheStore, StoreResult
from .memory import MemoryStore
from .redis_store import RedisStore

__all__ = ["CacheStore", "StoreResult", "MemoryStore", "RedisStore"]
