"""Synchronous newsletter sign-up used by the HTTP entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from notifier.domain.entities import (
    DEFAULT_SUBSCRIPTION_SOURCE,
    DELIVERY_MODE_INLINE,
    SUBSCRIPTION_STATUS_PENDING,
    EmailSubscription,
)
from notifier.infrastructure.channels import DeliveryChannelChain
from notifier.infrastructure.store import DocumentStore

from .delivery import DEFAULT_CONFIRMATION_SUBJECT, deliver_confirmation
from .errors import (
    ALREADY_EXISTS,
    ALREADY_SUBSCRIBED_MESSAGE,
    INTERNAL,
    INVALID_ARGUMENT,
    SubscriptionError,
)
from .validators import ensure_valid_email, ensure_valid_source

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully subscribed! Please check your email for confirmation."
DELIVERY_FAILED_MESSAGE = (
    "We could not send your confirmation email. Please contact support."
)
UNEXPECTED_ERROR_MESSAGE = "Failed to subscribe. Please try again later."


@dataclass
class SubscriptionResult:
    success: bool
    message: str
    subscription_id: str


async def subscribe_email(
    store: DocumentStore,
    chain: DeliveryChannelChain,
    email: object,
    source: object = None,
    *,
    subject: str = DEFAULT_CONFIRMATION_SUBJECT,
) -> SubscriptionResult:
    """Validate, persist a pending record and send the confirmation inline.

    Raises :class:`SubscriptionError` with ``invalid-argument``,
    ``already-exists`` or ``internal``.
    """

    try:
        normalized = ensure_valid_email(email)
        cleaned_source = ensure_valid_source(source)
    except ValueError as exc:
        raise SubscriptionError(INVALID_ARGUMENT, str(exc)) from exc

    try:
        if await store.find_active_subscription(normalized) is not None:
            raise SubscriptionError(ALREADY_EXISTS, ALREADY_SUBSCRIBED_MESSAGE)

        subscription = await store.create_subscription(
            EmailSubscription(
                id=None,
                email=normalized,
                status=SUBSCRIPTION_STATUS_PENDING,
                source=cleaned_source or DEFAULT_SUBSCRIPTION_SOURCE,
                delivery_mode=DELIVERY_MODE_INLINE,
            )
        )
        updated, outcome = await deliver_confirmation(
            store, chain, subscription, subject=subject
        )
    except SubscriptionError:
        raise
    except Exception as exc:
        logger.exception("Error subscribing %s", normalized)
        raise SubscriptionError(INTERNAL, UNEXPECTED_ERROR_MESSAGE) from exc

    if not updated.is_active:
        logger.error(
            "Subscription %s stays pending: %s", updated.id, outcome.error or "unknown error"
        )
        raise SubscriptionError(INTERNAL, DELIVERY_FAILED_MESSAGE)

    return SubscriptionResult(
        success=True,
        message=SUCCESS_MESSAGE,
        subscription_id=updated.id or "",
    )


__all__ = [
    "ALREADY_SUBSCRIBED_MESSAGE",
    "DELIVERY_FAILED_MESSAGE",
    "SUCCESS_MESSAGE",
    "SubscriptionResult",
    "subscribe_email",
]
