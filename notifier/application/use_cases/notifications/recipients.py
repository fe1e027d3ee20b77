"""Compute which identities must be notified for an event."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from notifier.domain.compat import canonical_service_type, legacy_receiver_id
from notifier.domain.entities import (
    ChatMessage,
    Resolution,
    ServiceProvider,
    SupportChatMessage,
)
from notifier.infrastructure.store import DocumentStore

logger = logging.getLogger(__name__)


class RecipientKind(str, Enum):
    ADMIN = "admin"
    ASSIGNED_PROVIDER = "assigned_provider"
    BROADCAST_POOL = "broadcast_pool"
    SUBMITTER = "submitter"


class RecipientResolver:
    """Resolve recipients without ever raising.

    Each lookup returns a :class:`Resolution`; failures degrade to an empty
    recipient list carrying the error text so sibling branches still run.
    """

    def __init__(self, store: DocumentStore, *, accept_legacy_schema: bool = True) -> None:
        self._store = store
        self._accept_legacy = accept_legacy_schema

    async def resolve(self, kind: RecipientKind, payload: Any = None) -> Resolution:
        """Single entry point: ``payload`` is the entity the event is about."""

        kind = RecipientKind(kind)
        if kind is RecipientKind.ADMIN:
            return await self.admins()
        if kind is RecipientKind.ASSIGNED_PROVIDER:
            provider_id = getattr(payload, "provider_id", None) or getattr(
                payload, "target_id", None
            )
            return await self.assigned_provider(provider_id)
        if kind is RecipientKind.BROADCAST_POOL:
            return await self.broadcast_pool(getattr(payload, "service_type", None))
        submitter_id = getattr(payload, "submitter_id", None) or getattr(
            payload, "owner_id", None
        )
        return self.submitter(submitter_id)

    async def admins(self) -> Resolution:
        async def lookup() -> Resolution:
            return Resolution(recipients=await self._store.list_admin_ids())

        return await self._guarded("admins", lookup)

    async def provider_record(
        self, provider_id: str | None
    ) -> tuple[ServiceProvider | None, Resolution]:
        """Dereference ``provider_id`` and return the record with its user."""

        if not provider_id:
            return None, Resolution()
        try:
            provider = await self._store.get_service_provider(provider_id)
        except Exception as exc:
            logger.exception("Error fetching provider %s", provider_id)
            return None, Resolution(error=f"provider {provider_id}: {exc}")
        if provider is None:
            logger.warning("Provider %s not found", provider_id)
            return None, Resolution(error=f"provider {provider_id} not found")
        if not provider.user_id:
            logger.warning("No userId found for provider %s", provider_id)
            return provider, Resolution(error=f"provider {provider_id} has no userId")
        return provider, Resolution(recipients=[provider.user_id])

    async def assigned_provider(self, provider_id: str | None) -> Resolution:
        _, resolution = await self.provider_record(provider_id)
        return resolution

    async def broadcast_pool(self, service_type: str | None) -> Resolution:
        """One entry per approved provider of ``service_type`` with a user."""

        canonical = canonical_service_type(service_type, accept_legacy=self._accept_legacy)
        if canonical is None:
            logger.warning("Unknown service type %r for broadcast", service_type)
            return Resolution(error=f"unknown service type {service_type!r}")

        async def lookup() -> Resolution:
            providers = await self._store.list_approved_providers(
                canonical, case_insensitive=self._accept_legacy
            )
            recipients = []
            for provider in providers:
                if provider.user_id:
                    recipients.append(provider.user_id)
                else:
                    logger.warning("Approved provider %s has no userId", provider.id)
            return Resolution(recipients=recipients)

        return await self._guarded(f"broadcast pool {canonical}", lookup)

    @staticmethod
    def submitter(submitter_id: str | None) -> Resolution:
        return Resolution(recipients=[submitter_id] if submitter_id else [])

    async def support_chat_counterparty(self, message: SupportChatMessage) -> Resolution:
        """User when an admin wrote; assigned admin or every admin otherwise."""

        try:
            chat = await self._store.get_support_chat(message.chat_id)
        except Exception as exc:
            logger.exception("Error fetching support chat %s", message.chat_id)
            return Resolution(error=f"support chat {message.chat_id}: {exc}")
        if chat is None:
            logger.error("Chat %s not found", message.chat_id)
            return Resolution(error=f"support chat {message.chat_id} not found")

        if message.is_admin:
            return self.submitter(chat.user_id)
        if chat.admin_id:
            return Resolution(recipients=[chat.admin_id])
        return await self.admins()

    async def chat_receiver(self, message: ChatMessage) -> Resolution:
        """The other participant of the chat ``message`` belongs to."""

        try:
            chat = await self._store.get_chat(message.chat_id)
        except Exception as exc:
            logger.exception("Error fetching chat %s", message.chat_id)
            return Resolution(error=f"chat {message.chat_id}: {exc}")
        if chat is None:
            logger.error("Chat %s not found", message.chat_id)
            return Resolution(error=f"chat {message.chat_id} not found")

        receiver_id = chat.other_participant(message.sender_id) or legacy_receiver_id(
            message.receiver_id, accept_legacy=self._accept_legacy
        )
        if not receiver_id or receiver_id == message.sender_id:
            logger.error("Receiver not found for chat %s", message.chat_id)
            return Resolution(error=f"receiver not found for chat {message.chat_id}")
        return Resolution(recipients=[receiver_id])

    async def display_name(self, user_id: str | None, default: str) -> str:
        """Name shown for ``user_id``; ``default`` on any lookup failure."""

        if not user_id:
            return default
        try:
            profile = await self._store.get_user(user_id)
        except Exception:
            logger.exception("Error fetching name for user %s", user_id)
            return default
        if profile is None:
            return default
        return profile.display_label(default)

    @staticmethod
    async def _guarded(
        step: str, lookup: Callable[[], Awaitable[Resolution]]
    ) -> Resolution:
        try:
            return await lookup()
        except Exception as exc:
            logger.exception("Error resolving %s", step)
            return Resolution(error=f"{step}: {exc}")


__all__ = ["RecipientKind", "RecipientResolver"]
