"""ORM models used by the application infrastructure."""

from ._ids import new_document_id
from .chat import ChatModel, SupportChatModel
from .email_subscription import EmailSubscriptionModel
from .notification import NotificationModel
from .service_provider import ServiceProviderModel
from .user import UserModel

__all__ = [
    "ChatModel",
    "EmailSubscriptionModel",
    "NotificationModel",
    "ServiceProviderModel",
    "SupportChatModel",
    "UserModel",
    "new_document_id",
]
