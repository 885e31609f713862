from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class TokenStatus(str, Enum):
    UNUSED = "unused"
    USED = "used"


class TokenRecordDict(TypedDict):
    status: str
    target: str
    timestamp: int


@dataclass(frozen=True)
class TokenRecord:
    """
    Value stored under a one-time token key.

    `last_transition_timestamp` is the time in milliseconds the record moved
    into `TokenStatus.USED`, and stays 0 while the token is unused.
    """

    status: TokenStatus
    target: str
    last_transition_timestamp: int = 0

    @classmethod
    def unused(cls, target: str) -> TokenRecord:
        return cls(status=TokenStatus.UNUSED, target=target)

    def mark_used(self, now_millis: int) -> TokenRecord:
        return TokenRecord(
            status=TokenStatus.USED,
            target=self.target,
            last_transition_timestamp=now_millis,
        )

    def to_value(self) -> str:
        """Encode the record as the string kept in the cache store."""
        payload: TokenRecordDict = {
            "status": self.status.value,
            "target": self.target,
            "timestamp": self.last_transition_timestamp,
        }
        return json.dumps(payload, separators=(",", ":"))

    @classmethod
    def from_value(cls, value: str) -> TokenRecord | None:
        """
        Decode a stored value. Anything that is not a well-formed record
        yields None, the same as a missing key.
        """
        try:
            payload = json.loads(value)
        except (TypeError, ValueError, RecursionError):
            return None
        if not isinstance(payload, dict) or set(payload) != {
            "status",
            "target",
            "timestamp",
        }:
            return None

        target = payload["target"]
        timestamp = payload["timestamp"]
        # bool is a subclass of int
        if not isinstance(target, str) or isinstance(timestamp, bool):
            return None
        if not isinstance(timestamp, int) or timestamp < 0:
            return None
        try:
            status = TokenStatus(payload["status"])
        except ValueError:
            return None

        return cls(status=status, target=target, last_transition_timestamp=timestamp)
