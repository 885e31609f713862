from ._one_time_token_error import OneTimeTokenError
from ._invalid_argument_error import InvalidArgumentError
from ._store_unavailable_error import StoreUnavailableError
from ._token_configuration_error import TokenConfigurationError
from ._token_generation_error import TokenGenerationError

__all__ = [
    "OneTimeTokenError",
    "InvalidArgumentError",
    "StoreUnavailableError",
    "TokenConfigurationError",
    "TokenGenerationError",
]
