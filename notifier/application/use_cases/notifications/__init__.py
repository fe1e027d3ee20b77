"""Event handlers creating in-app notifications."""

from .chats import on_chat_message_created
from .listings import on_listing_created
from .recipients import RecipientKind, RecipientResolver
from .reporting import emit_report, event_handler
from .reviews import on_review_created
from .service_requests import on_service_request_created, on_service_request_updated
from .support import on_support_chat_message_created, on_support_message_created
from .writer import NotificationWriter

__all__ = [
    "NotificationWriter",
    "RecipientKind",
    "RecipientResolver",
    "emit_report",
    "event_handler",
    "on_chat_message_created",
    "on_listing_created",
    "on_review_created",
    "on_service_request_created",
    "on_service_request_updated",
    "on_support_chat_message_created",
    "on_support_message_created",
]
