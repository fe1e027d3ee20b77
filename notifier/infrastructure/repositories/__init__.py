"""Repository implementations for infrastructure layer."""

from .chat_repository import ChatRepository
from .email_subscription_repository import (
    DuplicateActiveSubscriptionError,
    EmailSubscriptionRepository,
)
from .notification_repository import NotificationRepository
from .service_provider_repository import ServiceProviderRepository
from .user_repository import UserRepository

__all__ = [
    "ChatRepository",
    "DuplicateActiveSubscriptionError",
    "EmailSubscriptionRepository",
    "NotificationRepository",
    "ServiceProviderRepository",
    "UserRepository",
]
