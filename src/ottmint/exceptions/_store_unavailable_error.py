from ._one_time_token_error import OneTimeTokenError


class StoreUnavailableError(OneTimeTokenError):
    """Raised when the underlying cache store cannot be reached."""
