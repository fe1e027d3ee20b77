"""Asynchronous facade over the repositories used by the pipeline.

Every call opens its own short-lived session and runs in a worker thread so
that handlers can await store lookups and fan out writes concurrently.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from anyio import to_thread
from sqlalchemy.orm import Session, sessionmaker

from notifier.domain.entities import (
    ADMIN_ROLE,
    Chat,
    EmailSubscription,
    Notification,
    ServiceProvider,
    SupportChat,
    UserProfile,
)
from notifier.infrastructure.repositories import (
    ChatRepository,
    EmailSubscriptionRepository,
    NotificationRepository,
    ServiceProviderRepository,
    UserRepository,
)

T = TypeVar("T")


class DocumentStore:
    """Document store operations consumed by handlers and subscription flows."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        if session_factory is None:
            from notifier.infrastructure.database import SessionLocal

            session_factory = SessionLocal
        self._session_factory = session_factory

    async def _run(self, operation: Callable[[Session], T]) -> T:
        return await to_thread.run_sync(functools.partial(self._call, operation))

    def _call(self, operation: Callable[[Session], T]) -> T:
        session = self._session_factory()
        try:
            return operation(session)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # Identity directory

    async def get_user(self, user_id: str) -> UserProfile | None:
        return await self._run(lambda session: UserRepository(session).get(user_id))

    async def list_user_ids_by_role(self, role: str) -> list[str]:
        return await self._run(lambda session: UserRepository(session).list_ids_by_role(role))

    async def list_admin_ids(self) -> list[str]:
        return await self.list_user_ids_by_role(ADMIN_ROLE)

    # Service providers

    async def get_service_provider(self, provider_id: str) -> ServiceProvider | None:
        return await self._run(
            lambda session: ServiceProviderRepository(session).get(provider_id)
        )

    async def list_approved_providers(
        self, service_type: str, *, case_insensitive: bool = False
    ) -> list[ServiceProvider]:
        return await self._run(
            lambda session: ServiceProviderRepository(session).list_approved(
                service_type, case_insensitive=case_insensitive
            )
        )

    # Chats

    async def get_chat(self, chat_id: str) -> Chat | None:
        return await self._run(lambda session: ChatRepository(session).get_chat(chat_id))

    async def get_support_chat(self, chat_id: str) -> SupportChat | None:
        return await self._run(
            lambda session: ChatRepository(session).get_support_chat(chat_id)
        )

    # Notifications

    async def create_notification(self, notification: Notification) -> Notification:
        return await self._run(
            lambda session: NotificationRepository(session).create(notification)
        )

    async def list_notifications(self, recipient_id: str) -> list[Notification]:
        return await self._run(
            lambda session: list(
                NotificationRepository(session).list_for_recipient(recipient_id, limit=None)
            )
        )

    # Email subscriptions

    async def get_subscription(self, subscription_id: str) -> EmailSubscription | None:
        return await self._run(
            lambda session: EmailSubscriptionRepository(session).get(subscription_id)
        )

    async def find_active_subscription(
        self, email: str, *, exclude_id: str | None = None
    ) -> EmailSubscription | None:
        return await self._run(
            lambda session: EmailSubscriptionRepository(session).get_active_by_email(
                email, exclude_id=exclude_id
            )
        )

    async def create_subscription(self, subscription: EmailSubscription) -> EmailSubscription:
        return await self._run(
            lambda session: EmailSubscriptionRepository(session).create(subscription)
        )

    async def mark_subscription_active(
        self, subscription_id: str, *, channel: str, message_id: str, sent_at: datetime
    ) -> EmailSubscription:
        return await self._run(
            lambda session: EmailSubscriptionRepository(session).mark_active(
                subscription_id, channel=channel, message_id=message_id, sent_at=sent_at
            )
        )

    async def mark_subscription_failed(
        self, subscription_id: str, *, error: str, failed_at: datetime
    ) -> EmailSubscription:
        return await self._run(
            lambda session: EmailSubscriptionRepository(session).mark_failed(
                subscription_id, error=error, failed_at=failed_at
            )
        )


__all__ = ["DocumentStore"]
