"""
Store contract for the cache facade.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class StoreResult:
    """Result of a store read: found flag plus the stored value."""

    found: bool
    value: Any = None

    @classmethod
    def hit(cls, value: Any) -> "StoreResult":
        return cls(found=True, value=value)

    @classmethod
    def miss(cls) -> "StoreResult":
        return cls(found=False)


class CacheStore(Protocol):
    """Key-value store the facade dispatches to.

    Keys arrive already namespaced. A ttl of 0 means the entry never
    expires; expiry is enforced by the store.
    """

    def get(self, key: str) -> StoreResult:
        ...

    def set(self, key: str, value: Any, ttl: float) -> None:
        ...

    def delete(self, key: str) -> None:
        ...
