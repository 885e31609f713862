from ottmint.exceptions import (
    InvalidArgumentError,
    OneTimeTokenError,
    StoreUnavailableError,
    TokenConfigurationError,
    TokenGenerationError,
)
from ottmint.services import OneTimeTokenService
from ottmint.settings import Settings
from ottmint.stores import CacheStore, InMemoryCacheStore, RedisCacheStore

__all__ = [
    "OneTimeTokenService",
    "Settings",
    "CacheStore",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "OneTimeTokenError",
    "InvalidArgumentError",
    "StoreUnavailableError",
    "TokenConfigurationError",
    "TokenGenerationError",
]
