"""
In-process store with per-entry expiry.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from shared.logging import get_logger
from .base import StoreResult


@dataclass
class _Entry:
    value: Any
    expires_at: Optional[float]  # None never expires

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now


class MemoryStore:
    """Dictionary-backed store for tests and single-process deployments."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("cache_facade.stores.memory")

    def get(self, key: str) -> StoreResult:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return StoreResult.miss()
            if entry.is_expired(self._clock()):
                del self._entries[key]
                self.logger.debug("Dropped expired entry", key=key)
                return StoreResult.miss()
            return StoreResult.hit(entry.value)

    def set(self, key: str, value: Any, ttl: float) -> None:
        expires_at = self._clock() + ttl if ttl > 0 else None
        with self._lock:
            self._entries[key] = _Entry(value=value, expires_at=expires_at)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
