"""
Name: Token Denylist

Responsibilities:
  - Record revoked token ids (jti) until the token would have expired
  - Support both in-memory (dev/tests) and Redis (multi-process) backends

Collaborators:
  - domain.repositories.TokenDenylist
  - config.py: TOKEN_DENYLIST_BACKEND, REDIS_URL

Notes:
  - Entries expire with the token; an expired token fails verification anyway
  - Unlike a cache, failures here are not swallowed: a revoke that could not
    be recorded must fail the logout
"""

from __future__ import annotations

import time
from threading import Lock
from typing import Dict

from ..config import Settings
from ..logger import logger


class InMemoryTokenDenylist:
    """Thread-safe in-memory denylist (single process only)."""

    def __init__(self) -> None:
        self._revoked: Dict[str, int] = {}
        self._lock = Lock()

    def _purge_expired(self, now: float) -> None:
        expired = [jti for jti, exp in self._revoked.items() if exp <= now]
        for jti in expired:
            del self._revoked[jti]

    def revoke(self, jti: str, expires_at: int) -> bool:
        with self._lock:
            self._purge_expired(time.time())
            if jti in self._revoked:
                return False
            self._revoked[jti] = expires_at
            return True

    def is_revoked(self, jti: str) -> bool:
        with self._lock:
            expires_at = self._revoked.get(jti)
            if expires_at is None:
                return False
            if expires_at <= time.time():
                del self._revoked[jti]
                return False
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._revoked)


class RedisTokenDenylist:
    """
    Redis-backed denylist shared by every API process.

    Keys are written with SET NX EX so only the first revoke of a jti wins,
    and expire at the token's own expiry.
    """

    KEY_PREFIX = "user-api:revoked:"

    def __init__(self, redis_url: str | None = None, client=None):
        if client is None:
            import redis

            client = redis.from_url(redis_url, decode_responses=True)
        self._client = client

    def revoke(self, jti: str, expires_at: int) -> bool:
        ttl = max(1, int(expires_at - time.time()))
        return bool(self._client.set(f"{self.KEY_PREFIX}{jti}", "1", ex=ttl, nx=True))

    def is_revoked(self, jti: str) -> bool:
        return bool(self._client.exists(f"{self.KEY_PREFIX}{jti}"))


def create_token_denylist(settings: Settings):
    """R: Build the configured denylist backend."""
    if settings.token_denylist_backend == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is required when TOKEN_DENYLIST_BACKEND=redis")
        logger.info("Token denylist: using Redis backend")
        return RedisTokenDenylist(settings.redis_url)

    logger.info("Token denylist: using in-memory backend")
    return InMemoryTokenDenylist()
