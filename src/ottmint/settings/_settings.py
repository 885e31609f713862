from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from os import environ

from ottmint.exceptions import TokenConfigurationError


@dataclass(frozen=True)
class Settings:
    """
    Settings for one-time token issuance and validation.

    Attributes:
        expiration (timedelta): How long a token record lives in the store.
            The clock restarts when the token is first used (default: 5 minutes).
        grace_period (timedelta): Window after first use during which the
            token is still accepted again (default: 5 seconds).
        key_prefix (str): Namespace prepended to every store key (default: "OTT-").

    `grace_period` may not exceed `expiration`: a longer grace period could
    never be honoured because the record leaves the store first, so such a
    configuration is rejected as a likely mistake.

    Example:
    ```
        settings = Settings(
            expiration=timedelta(minutes=10),
            grace_period=timedelta(seconds=2),
        )
    ```
    """

    expiration: timedelta = timedelta(minutes=5)
    grace_period: timedelta = timedelta(seconds=5)
    key_prefix: str = "OTT-"

    def __post_init__(self) -> None:
        if self.expiration <= timedelta(0):
            raise TokenConfigurationError(
                f"expiration must be positive, got {self.expiration!r}"
            )
        if self.grace_period < timedelta(0):
            raise TokenConfigurationError(
                f"grace_period must not be negative, got {self.grace_period!r}"
            )
        if self.grace_period > self.expiration:
            raise TokenConfigurationError(
                "grace_period must not exceed expiration, the record would be "
                "gone from the store before the grace period ends"
            )
        if not isinstance(self.key_prefix, str) or not self.key_prefix.strip():
            raise TokenConfigurationError("key_prefix must be a non-empty string")

    @classmethod
    def from_environ(cls) -> Settings:
        """
        Build settings from environment variables, falling back to defaults:
        - OTT_EXPIRATION_SECONDS = "300"
        - OTT_GRACE_PERIOD_SECONDS = "5"
        - OTT_KEY_PREFIX = "OTT-"

        Unset or blank variables use the default.
        """
        defaults = cls()
        return cls(
            expiration=_seconds_from_environ(
                "OTT_EXPIRATION_SECONDS", defaults.expiration
            ),
            grace_period=_seconds_from_environ(
                "OTT_GRACE_PERIOD_SECONDS", defaults.grace_period
            ),
            key_prefix=environ.get("OTT_KEY_PREFIX", "").strip() or defaults.key_prefix,
        )


def _seconds_from_environ(name: str, default: timedelta) -> timedelta:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return timedelta(seconds=float(raw))
    except (ValueError, OverflowError):
        raise TokenConfigurationError(
            f"The {name} environment variable must be a number of seconds, "
            f"got '{raw}'. For example:\n\n"
            f"    {name} = '{int(default.total_seconds())}'"
        ) from None
