from __future__ import annotations

from contextlib import contextmanager
from datetime import timedelta
from os import environ
from typing import Any, Iterator

import redis

from ottmint.exceptions import StoreUnavailableError

# Compare-and-swap: overwrite KEYS[1] with ARGV[2] (PX ARGV[3]) only if it
# still holds ARGV[1].
REPLACE_IF_EQUAL_SCRIPT = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    redis.call('SET', KEYS[1], ARGV[2], 'PX', ARGV[3])
    return 1
end
return 0
"""


def _ttl_millis(ttl: timedelta) -> int:
    return max(1, int(ttl.total_seconds() * 1000))


class RedisCacheStore:
    """
    Cache store backed by Redis, shared by every process pointing at the
    same server. Use a dedicated Redis DB or key prefix.
    """

    def __init__(
        self,
        redis_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        """
        `client` must return raw bytes (the redis-py default, without
        `decode_responses`); values are decoded here.
        """
        self._redis = client or redis.from_url(  # type: ignore
            redis_url or environ.get("REDIS_URL", "redis://localhost:6379/0"),
        )

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except redis.RedisError as error:
            raise StoreUnavailableError(f"Redis {operation} failed: {error}") from error

    def get(self, key: str) -> str | None:
        with self._translate_errors("GET"):
            value = self._redis.get(key)
        # Undecodable bytes cannot hold a record; keep them so parsing rejects them.
        if isinstance(value, bytes):
            return value.decode(errors="replace")
        return value

    def put(self, key: str, value: str, ttl: timedelta) -> None:
        with self._translate_errors("SET"):
            self._redis.set(key, value, px=_ttl_millis(ttl))

    def put_if_absent(self, key: str, value: str, ttl: timedelta) -> bool:
        with self._translate_errors("SET NX"):
            return bool(self._redis.set(key, value, px=_ttl_millis(ttl), nx=True))

    def replace(self, key: str, expected: str, value: str, ttl: timedelta) -> bool:
        with self._translate_errors("EVAL"):
            result = self._redis.eval(
                REPLACE_IF_EQUAL_SCRIPT, 1, key, expected, value, _ttl_millis(ttl)
            )
        return int(result) == 1

    def delete(self, key: str) -> None:
        with self._translate_errors("DEL"):
            self._redis.delete(key)
