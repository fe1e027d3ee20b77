"""Collaborators shared by every handler invocation."""

from __future__ import annotations

from dataclasses import dataclass

from notifier.application.use_cases.notifications.recipients import RecipientResolver
from notifier.application.use_cases.notifications.writer import NotificationWriter
from notifier.config import Settings, get_settings
from notifier.infrastructure.channels import (
    DeliveryChannelChain,
    build_delivery_chain,
    descriptors_from_settings,
)
from notifier.infrastructure.store import DocumentStore


@dataclass
class PipelineContext:
    store: DocumentStore
    resolver: RecipientResolver
    writer: NotificationWriter
    chain: DeliveryChannelChain
    accept_legacy_schema: bool = True
    currency_symbol: str = "Rs"
    confirmation_subject: str = "Welcome to our newsletter"


def build_pipeline_context(
    *,
    store: DocumentStore | None = None,
    chain: DeliveryChannelChain | None = None,
    settings: Settings | None = None,
) -> PipelineContext:
    """Wire the pipeline from settings; explicit arguments take precedence."""

    settings = settings or get_settings()
    store = store or DocumentStore()
    if chain is None:
        chain = build_delivery_chain(descriptors_from_settings(settings))
    return PipelineContext(
        store=store,
        resolver=RecipientResolver(store, accept_legacy_schema=settings.accept_legacy_schema),
        writer=NotificationWriter(store),
        chain=chain,
        accept_legacy_schema=settings.accept_legacy_schema,
        currency_symbol=settings.currency_symbol,
        confirmation_subject=settings.confirmation_subject,
    )


__all__ = ["PipelineContext", "build_pipeline_context"]
