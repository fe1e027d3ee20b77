"""Notify the receiving participant of a direct chat message."""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.domain.entities import (
    ChatMessage,
    HandlerReport,
    NotificationCategory,
    TriggerEvent,
)

from .messages import chat_link, preview
from .reporting import event_handler

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext

DEFAULT_SENDER_NAME = "Someone"


@event_handler("chat_message.created")
async def on_chat_message_created(
    context: PipelineContext, event: TriggerEvent, report: HandlerReport
) -> None:
    chat_id = event.parent_id or ""
    message = ChatMessage.from_snapshot(event.document_id, chat_id, event.after)

    receiver = await context.resolver.chat_receiver(message)
    report.add_resolution("resolve.receiver", receiver)
    if not receiver.recipients:
        return

    sender = await context.resolver.display_name(message.sender_id, DEFAULT_SENDER_NAME)
    report.add_writes(
        "notify.receiver",
        await context.writer.fan_out(
            receiver.recipients,
            "New Chat Message",
            f"{sender}: {preview(message.text)}",
            NotificationCategory.INFO,
            chat_link(chat_id),
        ),
    )


__all__ = ["DEFAULT_SENDER_NAME", "on_chat_message_created"]
