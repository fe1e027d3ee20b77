"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import Notification, NotificationCategory
from notifier.infrastructure.models import NotificationModel
from notifier.utils import from_storage, now_in_app_timezone, to_storage


class NotificationRepository:
    """Create and read :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_recipient(
        self,
        recipient_id: str,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == recipient_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        model.recipient_id = notification.recipient_id
        model.title = notification.title
        model.message = notification.message
        model.category = NotificationCategory(notification.category).value
        model.read = False
        model.link = notification.link
        model.created_at = to_storage(
            notification.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            title=model.title,
            message=model.message,
            category=NotificationCategory(model.category),
            read=bool(model.read),
            link=model.link,
            created_at=from_storage(model.created_at),
        )


__all__ = ["NotificationRepository"]
