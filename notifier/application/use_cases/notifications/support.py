"""Support desk notifications: contact form messages and support chats."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.domain.entities import (
    HandlerReport,
    NotificationCategory,
    SupportChatMessage,
    SupportMessage,
    TriggerEvent,
)

from .messages import ADMIN_LINK, SUPPORT_CHAT_LINK, preview
from .reporting import event_handler

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext


@event_handler("support_message.created")
async def on_support_message_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    message = SupportMessage.from_snapshot(event.document_id, event.after)
    subject = message.subject or "No subject"
    sender = message.name or "a user"

    admins = await context.resolver.admins()
    report.add_resolution("resolve.admins", admins)
    report.add_writes(
        "notify.admins",
        await context.writer.fan_out(
            admins.recipients,
            "New Support Message",
            f'A new support message has been received: "{subject}" from {sender}.',
            NotificationCategory.INFO,
            ADMIN_LINK,
        ),
    )


@event_handler("support_chat_message.created")
async def on_support_chat_message_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    """Route a support chat message to the other side of the conversation."""

    chat_id = event.parent_id or ""
    message = SupportChatMessage.from_snapshot(event.document_id, chat_id, event.after)

    counterparty = await context.resolver.support_chat_counterparty(message)
    report.add_resolution("resolve.counterparty", counterparty)

    if message.is_admin:
        text = f'You have a new message from support: "{preview(message.text)}"'
        link = SUPPORT_CHAT_LINK
    else:
        text = f'You have a new message from a user: "{preview(message.text)}"'
        link = ADMIN_LINK

    report.add_writes(
        "notify.counterparty",
        await context.writer.fan_out(
            counterparty.recipients,
            "New Support Chat Message",
            text,
            NotificationCategory.INFO,
            link,
        ),
    )


__all__ = ["on_support_chat_message_created", "on_support_message_created"]
