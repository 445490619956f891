"""
Unit tests for the in-process store.
"""

import pytest

from cache_facade.stores.base import StoreResult
from cache_facade.stores.memory import MemoryStore


class TestMemoryStore:
    """Test cases for MemoryStore."""

    @pytest.fixture
    def clock(self):
        state = {"now": 0.0}

        def now():
            return state["now"]

        now.state = state
        return now

    @pytest.fixture
    def store(self, clock):
        return MemoryStore(clock=clock)

    def test_get_missing_key(self, store):
        assert store.get("nope") == StoreResult.miss()

    def test_set_and_get(self, store):
        store.set("cached_a", {"x": 1}, 0)

        result = store.get("cached_a")

        assert result.found is True
        assert result.value == {"x": 1}

    def test_none_value_is_found(self, store):
        store.set("cached_none", None, 0)

        assert store.get("cached_none") == StoreResult.hit(None)

    def test_expired_entry_is_dropped(self, store, clock):
        store.set("cached_t", "v", 5)

        clock.state["now"] = 5.0

        assert store.get("cached_t").found is False
        assert len(store) == 0

    def test_overwrite_resets_expiry(self, store, clock):
        store.set("cached_t", "v1", 5)
        clock.state["now"] = 4.0
        store.set("cached_t", "v2", 5)
        clock.state["now"] = 8.0

        assert store.get("cached_t").value == "v2"

    def test_delete(self, store):
        store.set("cached_d", 1, 0)

        store.delete("cached_d")
        store.delete("cached_d")

        assert store.get("cached_d").found is False
