from ._one_time_token_error import OneTimeTokenError


class TokenGenerationError(OneTimeTokenError):
    """Raised when no unused token identifier could be generated."""
