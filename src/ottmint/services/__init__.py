from ._one_time_token_service import OneTimeTokenService

__all__ = ["OneTimeTokenService"]
