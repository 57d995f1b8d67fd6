"""
Name: Token Denylist Tests

Responsibilities:
  - In-memory revocation and expiry purge
  - Redis key layout and TTL (mocked client)
  - Backend selection from settings
"""

import time
from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from user_api.infrastructure.token_denylist import (
    InMemoryTokenDenylist,
    RedisTokenDenylist,
    create_token_denylist,
)


pytestmark = pytest.mark.unit


class TestInMemoryTokenDenylist:
    def test_revoked_until_expiry(self, denylist):
        denylist.revoke("jti-1", int(time.time()) + 60)

        assert denylist.is_revoked("jti-1") is True
        assert denylist.is_revoked("jti-2") is False

    def test_second_revoke_of_same_id_loses(self, denylist):
        expires_at = int(time.time()) + 60

        assert denylist.revoke("jti-1", expires_at) is True
        assert denylist.revoke("jti-1", expires_at) is False
        assert len(denylist) == 1

    def test_concurrent_revokes_have_one_winner(self, denylist):
        expires_at = int(time.time()) + 60

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(
                pool.map(lambda _: denylist.revoke("jti-1", expires_at), range(8))
            )

        assert outcomes.count(True) == 1

    def test_expired_entries_are_dropped(self, denylist):
        denylist.revoke("old", int(time.time()) - 1)

        assert denylist.is_revoked("old") is False
        assert len(denylist) == 0

    def test_revoke_purges_expired_entries(self, denylist):
        denylist.revoke("old", int(time.time()) - 1)
        denylist.revoke("new", int(time.time()) + 60)

        assert len(denylist) == 1


class TestRedisTokenDenylist:
    def test_revoke_sets_key_once_with_ttl(self):
        client = MagicMock()
        client.set.return_value = True
        denylist = RedisTokenDenylist(client=client)

        with patch("user_api.infrastructure.token_denylist.time.time", return_value=1000):
            assert denylist.revoke("abc", 1600) is True

        client.set.assert_called_once_with(
            "user-api:revoked:abc", "1", ex=600, nx=True
        )

    def test_revoke_of_existing_key_loses(self):
        client = MagicMock()
        client.set.return_value = None

        assert RedisTokenDenylist(client=client).revoke("abc", 2**40) is False

    def test_ttl_is_at_least_one_second(self):
        client = MagicMock()
        denylist = RedisTokenDenylist(client=client)

        with patch("user_api.infrastructure.token_denylist.time.time", return_value=1000):
            denylist.revoke("abc", 900)

        client.set.assert_called_once_with("user-api:revoked:abc", "1", ex=1, nx=True)

    def test_is_revoked_checks_key(self):
        client = MagicMock()
        client.exists.return_value = 1
        denylist = RedisTokenDenylist(client=client)

        assert denylist.is_revoked("abc") is True
        client.exists.assert_called_once_with("user-api:revoked:abc")

    def test_is_not_revoked_when_key_missing(self):
        client = MagicMock()
        client.exists.return_value = 0

        assert RedisTokenDenylist(client=client).is_revoked("abc") is False


class TestCreateTokenDenylist:
    def test_memory_backend(self):
        settings = SimpleNamespace(token_denylist_backend="memory", redis_url="")

        assert isinstance(create_token_denylist(settings), InMemoryTokenDenylist)

    def test_redis_backend_requires_url(self):
        settings = SimpleNamespace(token_denylist_backend="redis", redis_url="")

        with pytest.raises(ValueError):
            create_token_denylist(settings)

    def test_redis_backend(self):
        settings = SimpleNamespace(
            token_denylist_backend="redis", redis_url="redis://localhost:6379/0"
        )

        with patch("redis.from_url") as from_url:
            denylist = create_token_denylist(settings)

        assert isinstance(denylist, RedisTokenDenylist)
        from_url.assert_called_once_with(
            "redis://localhost:6379/0", decode_responses=True
        )
