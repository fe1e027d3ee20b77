"""Persist one notification per recipient without ever failing the caller."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from notifier.domain.entities import Notification, NotificationCategory, WriteResult
from notifier.infrastructure.store import DocumentStore
from notifier.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


class NotificationWriter:
    """Create notification records; each write fails independently."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def write(
        self,
        recipient_id: str,
        title: str,
        message: str,
        category: NotificationCategory = NotificationCategory.INFO,
        link: str | None = None,
    ) -> WriteResult:
        notification = Notification(
            id=None,
            recipient_id=recipient_id,
            title=title,
            message=message,
            category=NotificationCategory(category),
            read=False,
            link=link,
            created_at=now_in_app_timezone(),
        )
        try:
            saved = await self._store.create_notification(notification)
        except Exception as exc:
            logger.exception("Error creating notification for user %s", recipient_id)
            return WriteResult(recipient_id=recipient_id, error=str(exc) or exc.__class__.__name__)

        logger.info("Notification created for user %s: %s", recipient_id, title)
        return WriteResult(recipient_id=recipient_id, notification_id=saved.id)

    async def fan_out(
        self,
        recipient_ids: Iterable[str],
        title: str,
        message: str,
        category: NotificationCategory = NotificationCategory.INFO,
        link: str | None = None,
    ) -> list[WriteResult]:
        """Write to every recipient concurrently and wait for all of them."""

        recipients = [recipient_id for recipient_id in recipient_ids if recipient_id]
        if not recipients:
            return []

        outcomes = await asyncio.gather(
            *(self.write(recipient_id, title, message, category, link) for recipient_id in recipients),
            return_exceptions=True,
        )
        results: list[WriteResult] = []
        for recipient_id, outcome in zip(recipients, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Notification write for %s raised: %s", recipient_id, outcome)
                results.append(WriteResult(recipient_id=recipient_id, error=str(outcome)))
            else:
                results.append(outcome)
        return results


__all__ = ["NotificationWriter"]
