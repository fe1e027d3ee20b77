"""Notifications for new property listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.domain.entities import (
    HandlerReport,
    Listing,
    NotificationCategory,
    TriggerEvent,
)

from .messages import ADMIN_LINK, listing_link
from .reporting import event_handler

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext


@event_handler("listing.created")
async def on_listing_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    """Ask admins to review the listing and confirm the submission to its owner."""

    listing = Listing.from_snapshot(event.document_id, event.after)
    title = listing.title or "Untitled"

    admins = await context.resolver.admins()
    report.add_resolution("resolve.admins", admins)
    report.add_writes(
        "notify.admins",
        await context.writer.fan_out(
            admins.recipients,
            "New Property Listed",
            f'A new property "{title}" has been listed and is pending approval.',
            NotificationCategory.INFO,
            ADMIN_LINK,
        ),
    )

    owner = context.resolver.submitter(listing.owner_id)
    report.add_writes(
        "notify.owner",
        await context.writer.fan_out(
            owner.recipients,
            "Property Listed Successfully",
            f'Your property "{title}" has been submitted and is pending admin approval.',
            NotificationCategory.STATUS_UPDATE,
            listing_link(listing.id),
        ),
    )


__all__ = ["on_listing_created"]
