from __future__ import annotations

import time
from datetime import timedelta
from threading import Lock
from typing import Callable


class InMemoryCacheStore:
    """
    Process-local cache store. Expired entries are dropped lazily on access.
    Suitable for a single process or tests; use RedisCacheStore when several
    processes share tokens.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._lock = Lock()
        self._entries: dict[str, tuple[str, float]] = {}

    def _cleanup(self, now: float) -> None:
        expired = [key for key, (_, exp) in self._entries.items() if exp <= now]
        for key in expired:
            self._entries.pop(key, None)

    def _live_value(self, key: str) -> str | None:
        now = self._clock()
        self._cleanup(now)
        entry = self._entries.get(key)
        return entry[0] if entry else None

    def _store(self, key: str, value: str, ttl: timedelta) -> None:
        self._entries[key] = (value, self._clock() + ttl.total_seconds())

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._live_value(key)

    def put(self, key: str, value: str, ttl: timedelta) -> None:
        with self._lock:
            self._cleanup(self._clock())
            self._store(key, value, ttl)

    def put_if_absent(self, key: str, value: str, ttl: timedelta) -> bool:
        with self._lock:
            if self._live_value(key) is not None:
                return False
            self._store(key, value, ttl)
            return True

    def replace(self, key: str, expected: str, value: str, ttl: timedelta) -> bool:
        with self._lock:
            if self._live_value(key) != expected:
                return False
            self._store(key, value, ttl)
            return True

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            self._cleanup(self._clock())
            return len(self._entries)
