class OneTimeTokenError(Exception):
    """Base class for every error raised by ottmint."""
