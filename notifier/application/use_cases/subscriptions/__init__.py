"""Use cases for newsletter subscriptions."""

from .delivery import build_confirmation_email, deliver_confirmation
from .errors import (
    ALREADY_EXISTS,
    ALREADY_SUBSCRIBED_MESSAGE,
    INTERNAL,
    INVALID_ARGUMENT,
    SubscriptionError,
)
from .subscribe import SubscriptionResult, subscribe_email
from .triggers import handle_subscription_created
from .validators import ensure_valid_email, ensure_valid_source, normalize_email

__all__ = [
    "ALREADY_EXISTS",
    "ALREADY_SUBSCRIBED_MESSAGE",
    "INTERNAL",
    "INVALID_ARGUMENT",
    "SubscriptionError",
    "SubscriptionResult",
    "build_confirmation_email",
    "deliver_confirmation",
    "ensure_valid_email",
    "ensure_valid_source",
    "handle_subscription_created",
    "normalize_email",
    "subscribe_email",
]
