"""Domain entities exposed by the application."""

from .chat import Chat, ChatMessage
from .email_subscription import (
    DEFAULT_SUBSCRIPTION_SOURCE,
    DELIVERY_MODE_INLINE,
    DELIVERY_MODE_TRIGGER,
    SUBSCRIPTION_STATUS_ACTIVE,
    SUBSCRIPTION_STATUS_PENDING,
    EmailSubscription,
)
from .listing import Listing
from .notification import Notification, NotificationCategory
from .reports import HandlerReport, Resolution, StepFailure, WriteResult
from .review import Review
from .service_provider import (
    SERVICE_TYPE_CONSTRUCTION,
    SERVICE_TYPE_RENOVATION,
    SERVICE_TYPES,
    ServiceProvider,
)
from .service_request import ServiceRequest, status_changed
from .support import SupportChat, SupportChatMessage, SupportMessage
from .trigger_event import EventKind, TriggerEvent
from .user import ADMIN_ROLE, DEFAULT_ROLE, UserProfile

__all__ = [
    "ADMIN_ROLE",
    "Chat",
    "ChatMessage",
    "DEFAULT_ROLE",
    "DEFAULT_SUBSCRIPTION_SOURCE",
    "DELIVERY_MODE_INLINE",
    "DELIVERY_MODE_TRIGGER",
    "EmailSubscription",
    "EventKind",
    "HandlerReport",
    "Listing",
    "Notification",
    "NotificationCategory",
    "Resolution",
    "Review",
    "SERVICE_TYPE_CONSTRUCTION",
    "SERVICE_TYPE_RENOVATION",
    "SERVICE_TYPES",
    "SUBSCRIPTION_STATUS_ACTIVE",
    "SUBSCRIPTION_STATUS_PENDING",
    "ServiceProvider",
    "ServiceRequest",
    "StepFailure",
    "SupportChat",
    "SupportChatMessage",
    "SupportMessage",
    "TriggerEvent",
    "UserProfile",
    "WriteResult",
    "status_changed",
]
