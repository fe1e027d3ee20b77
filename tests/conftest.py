"""Shared fixtures: a throwaway SQLite store and scripted delivery channels."""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

import pytest

from notifier.application.context import PipelineContext, build_pipeline_context
from notifier.config import Settings
from notifier.domain.entities import Chat, ServiceProvider, SupportChat, UserProfile
from notifier.infrastructure.channels import (
    ChannelError,
    DeliveryChannel,
    DeliveryChannelChain,
    DeliveryReceipt,
)
from notifier.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from notifier.infrastructure.repositories import (
    ChatRepository,
    ServiceProviderRepository,
    UserRepository,
)
from notifier.infrastructure.store import DocumentStore


class ScriptedChannel(DeliveryChannel):
    """Channel returning a fixed message id or raising a fixed error."""

    def __init__(
        self,
        name: str,
        *,
        message_id: str | None = None,
        error: str | None = None,
        configured: bool = True,
        delay: float = 0.0,
    ) -> None:
        self.name = name
        self.delay = delay
        self.message_id = message_id
        self.error = error
        self.configured = configured
        self.sent: list[str] = []

    def is_configured(self) -> bool:
        return self.configured

    def send(self, to_address, subject, html_body, text_body=None) -> DeliveryReceipt:
        self.sent.append(to_address)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise ChannelError(self.name, self.error)
        return DeliveryReceipt(channel=self.name, message_id=self.message_id or f"{self.name}-id")


class Seeder:
    """Write the documents handlers read from."""

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    def user(self, user_id: str, *, role: str | None = None, name: str | None = None,
             display_name: str | None = None, email: str | None = None) -> UserProfile:
        with self._session_factory() as session:
            return UserRepository(session).create(
                UserProfile(
                    id=user_id,
                    role=role,
                    name=name,
                    display_name=display_name,
                    email=email,
                )
            )

    def admin(self, user_id: str, **kwargs) -> UserProfile:
        return self.user(user_id, role="admin", **kwargs)

    def provider(self, provider_id: str, *, user_id: str | None, service_type: str,
                 approved: bool = True) -> ServiceProvider:
        with self._session_factory() as session:
            return ServiceProviderRepository(session).create(
                ServiceProvider(
                    id=provider_id,
                    user_id=user_id,
                    service_type=service_type,
                    is_approved=approved,
                )
            )

    def chat(self, chat_id: str, participants: list[str]) -> Chat:
        with self._session_factory() as session:
            return ChatRepository(session).create_chat(Chat(id=chat_id, participants=participants))

    def support_chat(self, chat_id: str, *, user_id: str | None,
                     admin_id: str | None = None) -> SupportChat:
        with self._session_factory() as session:
            return ChatRepository(session).create_support_chat(
                SupportChat(id=chat_id, user_id=user_id, admin_id=admin_id)
            )


@pytest.fixture()
def engine(tmp_path: Path):
    engine = build_engine(f"sqlite:///{tmp_path / 'notifier-test.db'}")
    initialize_database(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def store(session_factory) -> DocumentStore:
    return DocumentStore(session_factory)


@pytest.fixture()
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        accept_legacy_schema=True,
        sendgrid_api_key=None,
        sendgrid_sender=None,
    )


@pytest.fixture()
def make_context(store, settings):
    """Build a pipeline whose chain is made of the given channels."""

    def _make(*channels: DeliveryChannel, **overrides) -> PipelineContext:
        effective = settings.model_copy(update=overrides) if overrides else settings
        return build_pipeline_context(
            store=store,
            chain=DeliveryChannelChain(channels),
            settings=effective,
        )

    return _make


@pytest.fixture()
def context(make_context) -> PipelineContext:
    return make_context(ScriptedChannel("sendgrid", message_id="sg-1"))


@pytest.fixture()
def notifications_for(store):
    """Return the notifications persisted for a recipient."""

    def _list(recipient_id: str):
        return asyncio.run(store.list_notifications(recipient_id))

    return _list
