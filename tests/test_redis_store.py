"""
Unit tests for the Redis-backed store.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import redis

from cache_facade.facade import CacheFacade
from cache_facade.stores.redis_store import RedisStore
from shared.errors import StoreError


class TestRedisStore:
    """Test cases for RedisStore with a mocked client."""

    @pytest.fixture
    def client(self):
        return MagicMock()

    @pytest.fixture
    def store(self, client):
        return RedisStore("redis://localhost:6379/0", client=client)

    def test_from_url_used_without_client(self):
        with patch("cache_facade.stores.redis_store.redis.from_url") as mock_from_url:
            RedisStore("redis://cache:6379/1")

        mock_from_url.assert_called_once()
        assert mock_from_url.call_args.args[0] == "redis://cache:6379/1"
        assert mock_from_url.call_args.kwargs["decode_responses"] is True

    def test_get_miss_when_client_returns_none(self, store, client):
        client.get.return_value = None

        result = store.get("cached_k")

        assert result.found is False
        client.get.assert_called_once_with("cached_k")

    def test_get_decodes_json(self, store, client):
        client.get.return_value = json.dumps({"price": 52.5})

        result = store.get("cached_k")

        assert result.found is True
        assert result.value == {"price": 52.5}

    def test_stored_false_is_a_hit(self, store, client):
        client.get.return_value = "false"

        assert store.get("cached_flag").found is True
        assert store.get("cached_flag").value is False

    def test_set_without_expiry(self, store, client):
        store.set("cached_k", ["a", "b"], 0)

        client.set.assert_called_once_with("cached_k", '["a", "b"]')

    def test_set_with_expiry_uses_milliseconds(self, store, client):
        store.set("cached_k", "v", 1.5)

        client.set.assert_called_once_with("cached_k", '"v"', px=1500)

    def test_set_keeps_unicode(self, store, client):
        store.set("cached_k", "café", 0)

        client.set.assert_called_once_with("cached_k", '"café"')

    def test_set_rejects_unserializable_value(self, store, client):
        with pytest.raises(StoreError) as exc_info:
            store.set("cached_k", object(), 0)

        assert exc_info.value.code == "SERIALIZATION_ERROR"
        client.set.assert_not_called()

    @pytest.mark.parametrize("value", [
        (1, 2),
        {1: "a"},
        {"nested": [("x", 1)]},
        {"tags"},
        float("nan"),
        float("inf"),
    ])
    def test_set_rejects_values_altered_by_json(self, store, client, value):
        with pytest.raises(StoreError) as exc_info:
            store.set("cached_k", value, 0)

        assert exc_info.value.code == "SERIALIZATION_ERROR"
        client.set.assert_not_called()

    def test_set_accepts_json_native_values(self, store, client):
        value = {"price": 52.5, "volume": 1000, "open": True, "tags": ["a", None], "meta": {}}

        store.set("cached_k", value, 0)

        payload = client.set.call_args.args[1]
        assert json.loads(payload) == value

    def test_set_with_infinite_ttl_has_no_expiry(self, store, client):
        store.set("cached_k", "v", float("inf"))

        client.set.assert_called_once_with("cached_k", '"v"')

    def test_delete(self, store, client):
        store.delete("cached_k")

        client.delete.assert_called_once_with("cached_k")

    @pytest.mark.parametrize("method,args", [
        ("get", ("cached_k",)),
        ("set", ("cached_k", "v", 0)),
        ("delete", ("cached_k",)),
    ])
    def test_redis_errors_wrapped(self, store, client, method, args):
        getattr(client, method).side_effect = redis.ConnectionError("connection refused")

        with pytest.raises(StoreError) as exc_info:
            getattr(store, method)(*args)

        assert exc_info.value.code == "STORE_ERROR"
        assert "connection refused" in exc_info.value.message

    def test_health_check(self, store, client):
        client.ping.return_value = True
        assert store.health_check() is True

        client.ping.side_effect = redis.ConnectionError("down")
        assert store.health_check() is False

    def test_facade_over_redis_store(self, store, client):
        client.get.return_value = None
        cache = CacheFacade(store)

        assert cache.remember("count", 60, lambda: 42) == 42

        client.get.assert_called_once_with("cached_count")
        client.set.assert_called_once_with("cached_count", "42", px=60000)
