"""
Namespaced cache facade with read-through memoization.
"""

import math
import threading
import time
from typing import Any, Callable, Dict, Optional, Sequence

from shared.errors import ConfigurationError, InvalidExpiration, InvalidKey
from shared.logging import get_logger
from shared.metrics import CacheMetrics
from .stores.base import CacheStore, StoreResult

DEFAULT_DOMAIN = "cached"
NEVER_EXPIRES = 0


class CacheFacade:
    """Validates keys and expirations, namespaces keys, and dispatches to a store.

    Every key reaching the store is ``f"{domain}_{key}"``. The facade keeps no
    entry state of its own; expiry is owned by the store.

    Reads rely on the store's explicit found flag, so stored falsy values
    (``False``, ``0``, ``None``) count as hits for ``get``, ``has``, ``add``
    and ``remember``.
    """

    def __init__(
        self,
        store: CacheStore,
        domain: str = DEFAULT_DOMAIN,
        *,
        metrics: Optional[CacheMetrics] = None,
        single_flight: bool = False,
    ):
        if not domain or not isinstance(domain, str):
            raise ConfigurationError("Cache domain must be a non-empty string", {"domain": repr(domain)})
        self.store = store
        self.domain = domain
        self.metrics = metrics
        self.single_flight = single_flight
        self.logger = get_logger("cache_facade.facade")

        self._inflight: Dict[str, threading.Lock] = {}
        self._inflight_guard = threading.Lock()

    # Key/value operations

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds.

        A ttl of 0 never expires; a negative ttl is already expired, so any
        existing entry is removed instead.
        """
        storage_key = self._storage_key(key)
        self._write(storage_key, value, self._validate_ttl(ttl))

    def put(self, key: str, value: Any, ttl: float) -> None:
        self.set(key, value, ttl)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value, or ``default`` when the store has no entry."""
        result = self._read(self._storage_key(key), "get")
        return result.value if result.found else default

    def delete(self, key: str) -> None:
        storage_key = self._storage_key(key)
        self.store.delete(storage_key)
        self._record("delete", "delete")
        self.logger.debug("Cache delete", key=storage_key)

    def forget(self, key: str) -> None:
        self.delete(key)

    def has(self, key: str) -> bool:
        return self._read(self._storage_key(key), "has").found

    def pull(self, key: str, default: Any = None) -> Any:
        """Return the cached value (or ``default``) and remove the entry."""
        value = self.get(key, default)
        self.delete(key)
        return value

    def add(self, key: str, value: Any, ttl: float) -> bool:
        """Store only when no entry exists. Returns True if the value was stored."""
        if self.has(key):
            return False
        self.set(key, value, ttl)
        return True

    def forever(self, key: str, value: Any) -> None:
        self.put(key, value, NEVER_EXPIRES)

    # Read-through memoization

    def remember(
        self,
        key: str,
        ttl: float,
        producer: Callable[..., Any],
        params: Sequence[Any] = (),
    ) -> Any:
        """Return the cached value, computing and storing it on a miss.

        On a hit the producer is never called. On a miss ``producer(*params)``
        runs synchronously and its result is stored for ``ttl`` seconds.
        Producer exceptions propagate and nothing is stored.

        Without ``single_flight`` concurrent callers on a cold key may each
        run the producer.
        """
        storage_key = self._storage_key(key)

        result = self._read(storage_key, "remember")
        if result.found:
            return result.value

        ttl = self._validate_ttl(ttl)

        if not self.single_flight:
            return self._produce(storage_key, ttl, producer, params)

        lock = self._inflight_lock(storage_key)
        try:
            with lock:
                # Another caller may have filled the entry while we waited
                result = self.store.get(storage_key)
                if result.found:
                    return result.value
                return self._produce(storage_key, ttl, producer, params)
        finally:
            with self._inflight_guard:
                if self._inflight.get(storage_key) is lock and not lock.locked():
                    del self._inflight[storage_key]

    def remember_forever(
        self,
        key: str,
        producer: Callable[..., Any],
        params: Sequence[Any] = (),
    ) -> Any:
        return self.remember(key, NEVER_EXPIRES, producer, params)

    rememberForever = remember_forever

    # Internals

    def _storage_key(self, key: Any) -> str:
        if not key or not isinstance(key, str):
            raise InvalidKey(details={"key": repr(key)})
        return f"{self.domain}_{key}"

    def _validate_ttl(self, ttl: Any) -> float:
        if isinstance(ttl, bool):
            raise InvalidExpiration(details={"ttl": repr(ttl)})
        if isinstance(ttl, str):
            try:
                ttl = float(ttl)
            except ValueError:
                raise InvalidExpiration(details={"ttl": repr(ttl)}) from None
        if not isinstance(ttl, (int, float)) or math.isnan(ttl):
            raise InvalidExpiration(details={"ttl": repr(ttl)})
        return ttl

    def _read(self, storage_key: str, operation: str) -> StoreResult:
        result = self.store.get(storage_key)
        outcome = "hit" if result.found else "miss"
        self._record(operation, outcome)
        self.logger.debug("Cache read", key=storage_key, operation=operation, result=outcome)
        return result

    def _write(self, storage_key: str, value: Any, ttl: float) -> None:
        if ttl < 0:
            # Already expired
            self.store.delete(storage_key)
        else:
            self.store.set(storage_key, value, ttl)
        self._record("set", "write")
        self.logger.debug("Cache write", key=storage_key, ttl=ttl)

    def _produce(
        self,
        storage_key: str,
        ttl: float,
        producer: Callable[..., Any],
        params: Sequence[Any],
    ) -> Any:
        start_time = time.perf_counter()
        value = producer(*params)
        if self.metrics is not None:
            self.metrics.observe_producer(time.perf_counter() - start_time)

        self._write(storage_key, value, ttl)
        return value

    def _inflight_lock(self, storage_key: str) -> threading.Lock:
        with self._inflight_guard:
            lock = self._inflight.get(storage_key)
            if lock is None:
                lock = threading.Lock()
                self._inflight[storage_key] = lock
            return lock

    def _record(self, operation: str, result: str) -> None:
        if self.metrics is not None:
            self.metrics.record_operation(operation, result)
