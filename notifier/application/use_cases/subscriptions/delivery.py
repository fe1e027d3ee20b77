"""Confirmation email delivery shared by both subscription entry points."""

from __future__ import annotations

import html
import logging

from notifier.domain.entities import EmailSubscription
from notifier.infrastructure.channels import (
    ChainOutcome,
    DeliveryChannelChain,
    OutgoingEmail,
)
from notifier.infrastructure.repositories import DuplicateActiveSubscriptionError
from notifier.infrastructure.store import DocumentStore
from notifier.utils import now_in_app_timezone

from .errors import ALREADY_EXISTS, ALREADY_SUBSCRIBED_MESSAGE, SubscriptionError

logger = logging.getLogger(__name__)

DEFAULT_CONFIRMATION_SUBJECT = "Welcome to our newsletter"


def build_confirmation_email(
    email: str, subject: str = DEFAULT_CONFIRMATION_SUBJECT
) -> OutgoingEmail:
    """Compose the confirmation message sent after a sign-up."""

    address = html.escape(email)
    html_content = (
        "<p>Hello,</p>"
        f"<p>Thank you for subscribing with <strong>{address}</strong>.</p>"
        "<p>You will now receive our latest property listings, construction and "
        "renovation updates.</p>"
        "<p>If you did not request this subscription you can ignore this email.</p>"
    )
    text_content = (
        "Hello,\n\n"
        f"Thank you for subscribing with {email}.\n"
        "You will now receive our latest property listings, construction and "
        "renovation updates.\n\n"
        "If you did not request this subscription you can ignore this email.\n"
    )
    return OutgoingEmail(
        to_address=email,
        subject=subject,
        html_body=html_content,
        text_body=text_content,
    )


async def deliver_confirmation(
    store: DocumentStore,
    chain: DeliveryChannelChain,
    subscription: EmailSubscription,
    *,
    subject: str = DEFAULT_CONFIRMATION_SUBJECT,
) -> tuple[EmailSubscription, ChainOutcome]:
    """Run the channel chain and persist the resulting subscription state.

    Success moves the record to ``active``. Total failure keeps it ``pending``
    with the last error and a failure timestamp. When another record for the
    same address became active first, this one stays ``pending`` and
    :class:`SubscriptionError` with ``already-exists`` is raised.
    """

    if subscription.id is None:
        raise ValueError("Subscription must be persisted before delivery")

    outcome = await chain.deliver(build_confirmation_email(subscription.email, subject))
    if outcome.success and outcome.channel and outcome.message_id is not None:
        logger.info(
            "Confirmation for subscription %s sent via %s (%s)",
            subscription.id,
            outcome.channel,
            outcome.message_id,
        )
        try:
            updated = await store.mark_subscription_active(
                subscription.id,
                channel=outcome.channel,
                message_id=outcome.message_id,
                sent_at=now_in_app_timezone(),
            )
        except DuplicateActiveSubscriptionError as exc:
            logger.warning("Subscription %s not activated: %s", subscription.id, exc)
            await store.mark_subscription_failed(
                subscription.id,
                error=ALREADY_SUBSCRIBED_MESSAGE,
                failed_at=now_in_app_timezone(),
            )
            raise SubscriptionError(ALREADY_EXISTS, ALREADY_SUBSCRIBED_MESSAGE) from exc
        return updated, outcome

    error = outcome.error or "Delivery failed"
    logger.error("Confirmation for subscription %s failed: %s", subscription.id, error)
    updated = await store.mark_subscription_failed(
        subscription.id,
        error=error,
        failed_at=now_in_app_timezone(),
    )
    return updated, outcome


__all__ = [
    "DEFAULT_CONFIRMATION_SUBJECT",
    "build_confirmation_email",
    "deliver_confirmation",
]
