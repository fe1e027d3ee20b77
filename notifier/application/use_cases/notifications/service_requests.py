"""Notifications for construction and renovation requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.domain.entities import (
    SERVICE_TYPE_CONSTRUCTION,
    SERVICE_TYPE_RENOVATION,
    HandlerReport,
    NotificationCategory,
    ServiceRequest,
    TriggerEvent,
    status_changed,
)

from .messages import ACCOUNT_LINK, format_currency, provider_dashboard, service_label
from .reporting import event_handler

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext

SERVICE_REQUEST_COLLECTIONS = {
    "constructionProjects": SERVICE_TYPE_CONSTRUCTION,
    "renovationProjects": SERVICE_TYPE_RENOVATION,
}


def service_type_for(event: TriggerEvent) -> str:
    """Service type implied by the collection the request lives in."""

    collection = event.segments[0]
    try:
        return SERVICE_REQUEST_COLLECTIONS[collection]
    except KeyError:
        msg = f"{collection} is not a service request collection"
        raise ValueError(msg) from None


@event_handler("service_request.created")
async def on_service_request_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    """Confirm to the client, then notify the assigned provider or the broadcast pool."""

    service_type = service_type_for(event)
    request = ServiceRequest.from_snapshot(event.document_id, service_type, event.after)
    label = service_label(service_type)
    budget = format_currency(request.budget, context.currency_symbol)

    follow_up = (
        "The provider will review it soon."
        if request.is_assigned
        else "We will match you with a provider soon."
    )
    submitter = context.resolver.submitter(request.submitter_id)
    report.add_writes(
        "notify.submitter",
        await context.writer.fan_out(
            submitter.recipients,
            f"{label} Request Submitted",
            f"Your {label.lower()} request has been submitted successfully. {follow_up}",
            NotificationCategory.SERVICE_REQUEST,
            ACCOUNT_LINK,
        ),
    )

    if request.is_assigned:
        provider = await context.resolver.assigned_provider(request.provider_id)
        report.add_resolution("resolve.assigned_provider", provider)
        report.add_writes(
            "notify.assigned_provider",
            await context.writer.fan_out(
                provider.recipients,
                f"New {label} Request",
                f"You have received a new {label.lower()} request. Budget: {budget}",
                NotificationCategory.SERVICE_REQUEST,
                provider_dashboard(service_type),
            ),
        )
        return

    pool = await context.resolver.broadcast_pool(service_type)
    report.add_resolution("resolve.broadcast_pool", pool)
    report.add_writes(
        "notify.broadcast_pool",
        await context.writer.fan_out(
            pool.recipients,
            f"New {label} Request Available",
            f"A new {label.lower()} request is available. Budget: {budget}",
            NotificationCategory.SERVICE_REQUEST,
            provider_dashboard(service_type),
        ),
    )


@event_handler("service_request.updated")
async def on_service_request_updated(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    """Notify client and assigned provider, only when the status value changed."""

    service_type = service_type_for(event)
    before = ServiceRequest.from_snapshot(event.document_id, service_type, event.before or {})
    after = ServiceRequest.from_snapshot(event.document_id, service_type, event.after)
    if not status_changed(before, after):
        report.skip("status unchanged")
        return

    label = service_label(service_type)
    status = after.status or "Unknown"

    submitter = context.resolver.submitter(after.submitter_id)
    report.add_writes(
        "notify.submitter",
        await context.writer.fan_out(
            submitter.recipients,
            f"{label} Project Status Updated",
            f'Your {label.lower()} project status has been updated to "{status}".',
            NotificationCategory.STATUS_UPDATE,
            ACCOUNT_LINK,
        ),
    )

    if not after.is_assigned:
        return

    provider = await context.resolver.assigned_provider(after.provider_id)
    report.add_resolution("resolve.assigned_provider", provider)
    report.add_writes(
        "notify.assigned_provider",
        await context.writer.fan_out(
            provider.recipients,
            f"{label} Project Status Updated",
            f'{label} project status has been updated to "{status}".',
            NotificationCategory.STATUS_UPDATE,
            provider_dashboard(service_type),
        ),
    )


__all__ = [
    "SERVICE_REQUEST_COLLECTIONS",
    "on_service_request_created",
    "on_service_request_updated",
    "service_type_for",
]
