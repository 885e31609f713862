from __future__ import annotations

import logging
import secrets
import time
from datetime import timedelta
from typing import Callable

from ottmint.exceptions import InvalidArgumentError, TokenGenerationError
from ottmint.schema import TokenRecord, TokenStatus
from ottmint.settings import Settings
from ottmint.stores import CacheStore, RedisCacheStore

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 3


def _require_text(value: str, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{name} must not be blank")


def _short(token: str) -> str:
    return token[:6] + "..."


class OneTimeTokenService:
    """
    High-level API to issue, validate, and revoke one-time tokens.

    A token starts unused, becomes used on its first successful validation
    and is accepted again only within the grace period after that. The store
    drops the record once `Settings.expiration` elapses.
    """

    def __init__(
        self,
        cache_store: CacheStore | None = None,
        settings: Settings | None = None,
        token_generator: Callable[[], str] | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        # An empty InMemoryCacheStore is falsy.
        self.cache_store = RedisCacheStore() if cache_store is None else cache_store
        self.settings = settings or Settings()
        self._generate_token = token_generator or self._random_token
        self._now = clock or self._now_millis

    @staticmethod
    def _random_token() -> str:
        return secrets.token_urlsafe(24)

    @staticmethod
    def _now_millis() -> int:
        return int(time.time() * 1000)

    def _key(self, token: str) -> str:
        return f"{self.settings.key_prefix}{token}"

    def issue(self, target: str) -> str:
        """Issue a token bound to `target` and return its identifier."""
        _require_text(target, "target")

        value = TokenRecord.unused(target).to_value()
        for _ in range(MAX_GENERATION_ATTEMPTS):
            token = self._generate_token()
            if self.cache_store.put_if_absent(
                self._key(token), value, self.settings.expiration
            ):
                logger.debug("Issued one-time token %s", _short(token))
                return token
            logger.warning("Generated token %s is already live", _short(token))

        raise TokenGenerationError(
            f"Could not generate an unused token in {MAX_GENERATION_ATTEMPTS} attempts"
        )

    def validate(self, token: str) -> str | None:
        """
        Return the target bound to `token` if it may be used now, else None.

        The first validation marks the token as used. Later validations
        succeed only within the grace period. Never-issued, expired, revoked
        and malformed tokens are all rejected the same way.
        """
        _require_text(token, "token")

        key = self._key(token)
        value = self.cache_store.get(key)
        if value is None:
            logger.debug("Rejected one-time token %s: not found", _short(token))
            return None

        record = TokenRecord.from_value(value)
        if record is None:
            logger.warning("Rejected one-time token %s: malformed record", _short(token))
            return None

        now = self._now()
        if record.status is TokenStatus.UNUSED:
            used = record.mark_used(now)
            if self.cache_store.replace(
                key, value, used.to_value(), self.settings.expiration
            ):
                logger.debug("Consumed one-time token %s", _short(token))
                return record.target

            # Another caller changed the record since it was read.
            logger.warning("Lost first-use race for one-time token %s", _short(token))
            fresh = self.cache_store.get(key)
            record = TokenRecord.from_value(fresh) if fresh is not None else None
            if record is None or record.status is not TokenStatus.USED:
                return None

        return self._within_grace_period(token, record, now)

    def _within_grace_period(
        self,
        token: str,
        record: TokenRecord,
        now: int,
    ) -> str | None:
        elapsed = now - record.last_transition_timestamp
        grace_millis = self.settings.grace_period // timedelta(milliseconds=1)
        if elapsed <= grace_millis:
            logger.debug("Re-validated one-time token %s within grace period", _short(token))
            return record.target

        logger.debug("Rejected one-time token %s: already used", _short(token))
        return None

    def revoke(self, token: str) -> None:
        """Explicitly revoke a token (e.g., on user action)."""
        _require_text(token, "token")

        self.cache_store.delete(self._key(token))
        logger.debug("Revoked one-time token %s", _short(token))
