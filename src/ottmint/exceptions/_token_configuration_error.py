from ._one_time_token_error import OneTimeTokenError


class TokenConfigurationError(OneTimeTokenError):
    """Raised when token settings are missing or inconsistent."""
