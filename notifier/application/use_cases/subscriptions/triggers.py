"""Reactive confirmation delivery for subscription records created elsewhere."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.application.use_cases.notifications.reporting import event_handler
from notifier.domain.entities import DELIVERY_MODE_INLINE, HandlerReport, TriggerEvent
from notifier.utils import now_in_app_timezone

from .delivery import deliver_confirmation
from .errors import ALREADY_SUBSCRIBED_MESSAGE, SubscriptionError

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext


@event_handler("email_subscription.created")
async def handle_subscription_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    """Send the confirmation for a freshly written ``pending`` record."""

    subscription = await context.store.get_subscription(event.document_id)
    if subscription is None:
        report.fail("load", f"subscription {event.document_id} not found")
        return
    if subscription.is_active:
        report.skip("already active")
        return
    if subscription.delivery_mode == DELIVERY_MODE_INLINE:
        report.skip("delivered by the synchronous path")
        return
    if not subscription.is_pending:
        report.skip(f"status {subscription.status!r} is not pending")
        return

    duplicate = await context.store.find_active_subscription(
        subscription.email, exclude_id=subscription.id
    )
    if duplicate is not None:
        await context.store.mark_subscription_failed(
            subscription.id or event.document_id,
            error=ALREADY_SUBSCRIBED_MESSAGE,
            failed_at=now_in_app_timezone(),
        )
        report.skip(f"duplicate of active subscription {duplicate.id}")
        return

    try:
        updated, outcome = await deliver_confirmation(
            context.store,
            context.chain,
            subscription,
            subject=context.confirmation_subject,
        )
    except SubscriptionError as exc:
        report.skip(f"not activated: {exc.message}")
        return
    if updated.is_active:
        report.notified.append(updated.email)
    else:
        report.fail("deliver", outcome.error or "delivery failed")


__all__ = ["handle_subscription_created"]
