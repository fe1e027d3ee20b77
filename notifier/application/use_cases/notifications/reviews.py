"""Notify providers about reviews left on their services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.domain.compat import canonical_service_type, resolve_review_target
from notifier.domain.entities import (
    HandlerReport,
    NotificationCategory,
    Review,
    TriggerEvent,
)

from .messages import format_rating, provider_dashboard
from .reporting import event_handler

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext

DEFAULT_REVIEWER_NAME = "A user"


@event_handler("review.created")
async def on_review_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    review = Review.from_snapshot(event.document_id, event.after)
    target = resolve_review_target(
        review.target_type, accept_legacy=context.accept_legacy_schema
    )
    if target is None:
        report.skip(f"review target type {review.target_type!r} has no provider")
        return
    if not review.target_id:
        report.fail("review", f"no target id found for review {review.id}")
        return

    provider, resolution = await context.resolver.provider_record(review.target_id)
    report.add_resolution("resolve.provider", resolution)
    if not resolution.recipients:
        return

    service_type = target.service_type
    if service_type is None and provider is not None:
        # Legacy "provider" targets carry the service type on the provider record.
        service_type = canonical_service_type(
            provider.service_type, accept_legacy=context.accept_legacy_schema
        )

    reviewer = await context.resolver.display_name(review.author_id, DEFAULT_REVIEWER_NAME)
    kind = service_type or "provider"
    report.add_writes(
        "notify.provider",
        await context.writer.fan_out(
            resolution.recipients,
            "New Review Received",
            f"{reviewer} left a {format_rating(review.rating)}-star review "
            f"for your {kind} service.",
            NotificationCategory.INFO,
            provider_dashboard(service_type),
        ),
    )


__all__ = ["DEFAULT_REVIEWER_NAME", "on_review_created"]
