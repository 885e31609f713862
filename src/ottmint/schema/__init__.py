from ._token_record import TokenRecord, TokenRecordDict, TokenStatus

__all__ = ["TokenRecord", "TokenRecordDict", "TokenStatus"]
