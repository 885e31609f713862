from __future__ import annotations

from datetime import timedelta
from typing import Protocol


class CacheStore(Protocol):
    """
    String key-value store whose entries expire after a TTL.
    Implementations may be process-local or shared across processes.
    """

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str, ttl: timedelta) -> None: ...

    def put_if_absent(self, key: str, value: str, ttl: timedelta) -> bool:
        """Store the value only if the key is not live; True if it was stored."""
        ...

    def replace(self, key: str, expected: str, value: str, ttl: timedelta) -> bool:
        """Overwrite the value only if it still equals `expected`; True on success."""
        ...

    def delete(self, key: str) -> None: ...
