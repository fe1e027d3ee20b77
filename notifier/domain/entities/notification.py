"""Domain entity representing an in-app notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationCategory(str, Enum):
    """Display category attached to every notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    SERVICE_REQUEST = "service-request"
    STATUS_UPDATE = "status-update"
    ADMIN = "admin"


@dataclass
class Notification:
    """One alert addressed to a single recipient."""

    id: str | None
    recipient_id: str
    title: str
    message: str
    category: NotificationCategory = NotificationCategory.INFO
    read: bool = False
    link: str | None = None
    created_at: datetime | None = None


__all__ = ["Notification", "NotificationCategory"]
