"""
Redis-backed store for the cache facade.
"""

import json
import math
from typing import Any, Optional

import redis

from shared.errors import StoreError
from shared.logging import get_logger
from .base import StoreResult


class RedisStore:
    """Redis store holding JSON-encoded values.

    A ttl of 0 (or infinity) writes a key without expiry; other ttls are sent
    as PX milliseconds so fractional seconds survive.

    Only values that survive a JSON round trip unchanged are accepted: str,
    int, float, bool, None, lists and dicts with str keys. Tuples, sets,
    non-str dict keys and NaN or infinite floats raise StoreError with SERIALIZATION_ERROR
    rather than coming back altered.
    """

    def __init__(self, redis_url: str, client: Optional[redis.Redis] = None):
        self.redis_url = redis_url
        self.logger = get_logger("cache_facade.stores.redis")
        self._client = client if client is not None else redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30
        )

    def get(self, key: str) -> StoreResult:
        try:
            cached_data = self._client.get(key)
        except redis.RedisError as e:
            self.logger.error("Redis get failed", key=key, error=str(e))
            raise StoreError("redis", str(e), {"key": key}) from e

        if cached_data is None:
            return StoreResult.miss()
        return StoreResult.hit(json.loads(cached_data))

    def set(self, key: str, value: Any, ttl: float) -> None:
        try:
            payload = json.dumps(value, ensure_ascii=False, allow_nan=False)
            round_trips = _same_json_value(json.loads(payload), value)
        except (TypeError, ValueError) as e:
            raise StoreError(
                "redis",
                f"value is not JSON serializable: {e}",
                {"key": key},
                code="SERIALIZATION_ERROR"
            ) from e
        if not round_trips:
            raise StoreError(
                "redis",
                "value does not survive a JSON round trip",
                {"key": key, "type": type(value).__name__},
                code="SERIALIZATION_ERROR"
            )

        try:
            if 0 < ttl < math.inf:
                self._client.set(key, payload, px=max(1, int(ttl * 1000)))
            else:
                self._client.set(key, payload)
        except redis.RedisError as e:
            self.logger.error("Redis set failed", key=key, error=str(e))
            raise StoreError("redis", str(e), {"key": key}) from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            self.logger.error("Redis delete failed", key=key, error=str(e))
            raise StoreError("redis", str(e), {"key": key}) from e

    def health_check(self) -> bool:
        """Check Redis health."""
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def close(self) -> None:
        self._client.close()
        self.logger.info("Redis store closed")


def _same_json_value(decoded: Any, original: Any) -> bool:
    """Compare a decoded payload with the original, including container types."""
    if type(decoded) is not type(original):
        return False
    if isinstance(original, list):
        return len(decoded) == len(original) and all(
            _same_json_value(d, o) for d, o in zip(decoded, original)
        )
    if isinstance(original, dict):
        return decoded.keys() == original.keys() and all(
            _same_json_value(decoded[k], original[k]) for k in original
        )
    return decoded == original
