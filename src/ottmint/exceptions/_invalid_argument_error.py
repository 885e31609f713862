from ._one_time_token_error import OneTimeTokenError


class InvalidArgumentError(OneTimeTokenError, ValueError):
    """Raised when a token identifier or target is empty or blank."""
