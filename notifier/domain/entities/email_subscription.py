"""Domain entity tracking a newsletter sign-up and its confirmation email."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

SUBSCRIPTION_STATUS_PENDING = "pending"
SUBSCRIPTION_STATUS_ACTIVE = "active"

DELIVERY_MODE_INLINE = "inline"
DELIVERY_MODE_TRIGGER = "trigger"

DEFAULT_SUBSCRIPTION_SOURCE = "footer"


@dataclass
class EmailSubscription:
    """Subscription record; ``active`` is terminal."""

    id: str | None
    email: str
    status: str = SUBSCRIPTION_STATUS_PENDING
    source: str = DEFAULT_SUBSCRIPTION_SOURCE
    delivery_mode: str = DELIVERY_MODE_TRIGGER
    email_message_id: str | None = None
    email_channel: str | None = None
    email_error: str | None = None
    email_sent_at: datetime | None = None
    email_failed_at: datetime | None = None
    created_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == SUBSCRIPTION_STATUS_ACTIVE

    @property
    def is_pending(self) -> bool:
        return self.status == SUBSCRIPTION_STATUS_PENDING


__all__ = [
    "DEFAULT_SUBSCRIPTION_SOURCE",
    "DELIVERY_MODE_INLINE",
    "DELIVERY_MODE_TRIGGER",
    "EmailSubscription",
    "SUBSCRIPTION_STATUS_ACTIVE",
    "SUBSCRIPTION_STATUS_PENDING",
]
