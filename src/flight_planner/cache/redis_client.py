"""Redis connection + JSON/text cache helpers.

Every operation is guarded: a Redis failure never breaks a lookup, it
just turns the cache into a miss.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

log = logging.getLogger(__name__)


class RedisCache:
    """Thin wrapper around an optional ``redis.Redis`` client."""

    def __init__(self, client=None):
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        """Connect to ``url``; an empty URL or unreachable server gives a disabled cache."""
        if not url:
            return cls(None)
        try:
            import redis

            client = redis.Redis.from_url(url, decode_responses=True, socket_connect_timeout=3)
            client.ping()
            log.info("Redis connected: %s", url)
            return cls(client)
        except Exception as exc:
            log.warning("Redis unavailable (%s), running without cache", exc)
            return cls(None)

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def ping(self) -> bool:
        if self.client is None:
            return False
        try:
            return bool(self.client.ping())
        except Exception as exc:
            log.debug("Redis ping failed: %s", exc)
            return False

    # ── JSON helpers ─────────────────────────────────────────────────────

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get_text(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return None

    def set_json(self, key: str, value: Any, ttl: int) -> None:
        self.set_text(key, json.dumps(value), ttl)

    # ── Text helpers ─────────────────────────────────────────────────────

    def get_text(self, key: str) -> Optional[str]:
        if self.client is None:
            return None
        try:
            return self.client.get(key)
        except Exception as exc:
            log.debug("Redis get %s failed: %s", key, exc)
            return None

    def set_text(self, key: str, value: str, ttl: int) -> None:
        if self.client is None:
            return
        try:
            self.client.set(key, value, ex=ttl)
        except Exception as exc:
            log.debug("Redis set %s failed: %s", key, exc)
