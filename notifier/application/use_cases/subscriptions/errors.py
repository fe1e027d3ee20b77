"""Typed failures of the synchronous subscription path."""

from __future__ import annotations

INVALID_ARGUMENT = "invalid-argument"
ALREADY_EXISTS = "already-exists"
INTERNAL = "internal"

ERROR_CODES = (INVALID_ARGUMENT, ALREADY_EXISTS, INTERNAL)

ALREADY_SUBSCRIBED_MESSAGE = "This email is already subscribed"


class SubscriptionError(Exception):
    """Client-facing failure carrying one of :data:`ERROR_CODES`."""

    def __init__(self, code: str, message: str) -> None:
        if code not in ERROR_CODES:
            raise ValueError(f"Unknown subscription error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message


__all__ = [
    "ALREADY_EXISTS",
    "ALREADY_SUBSCRIBED_MESSAGE",
    "ERROR_CODES",
    "INTERNAL",
    "INVALID_ARGUMENT",
    "SubscriptionError",
]
