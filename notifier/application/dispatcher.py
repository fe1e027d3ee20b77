"""Route document lifecycle events to their handlers."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from notifier.application.context import PipelineContext
from notifier.application.use_cases.notifications import (
    on_chat_message_created,
    on_listing_created,
    on_review_created,
    on_service_request_created,
    on_service_request_updated,
    on_support_chat_message_created,
    on_support_message_created,
)
from notifier.application.use_cases.notifications.reporting import Handler
from notifier.application.use_cases.subscriptions import handle_subscription_created
from notifier.domain.entities import EventKind, HandlerReport, TriggerEvent

logger = logging.getLogger(__name__)

RouteKey = tuple[str, EventKind]


def default_routes() -> dict[RouteKey, Handler]:
    """Collection group and event kind for every supported trigger."""

    return {
        ("properties", EventKind.CREATED): on_listing_created,
        ("constructionProjects", EventKind.CREATED): on_service_request_created,
        ("renovationProjects", EventKind.CREATED): on_service_request_created,
        ("constructionProjects", EventKind.UPDATED): on_service_request_updated,
        ("renovationProjects", EventKind.UPDATED): on_service_request_updated,
        ("reviews", EventKind.CREATED): on_review_created,
        ("supportMessages", EventKind.CREATED): on_support_message_created,
        ("supportChats/messages", EventKind.CREATED): on_support_chat_message_created,
        ("chats/messages", EventKind.CREATED): on_chat_message_created,
        ("email_subscriptions", EventKind.CREATED): handle_subscription_created,
    }


class TriggerDispatcher:
    """Select the handler for an event and run it."""

    def __init__(
        self,
        context: PipelineContext,
        routes: Mapping[RouteKey, Handler] | None = None,
    ) -> None:
        self._context = context
        self._routes = dict(default_routes() if routes is None else routes)

    def handler_for(self, event: TriggerEvent) -> Handler | None:
        return self._routes.get((event.collection_group, event.event_kind))

    async def dispatch(self, event: TriggerEvent) -> HandlerReport:
        handler = self.handler_for(event)
        if handler is None:
            logger.info(
                "No handler for %s event on %s", event.event_kind.value, event.document_path
            )
            report = HandlerReport(
                handler="unrouted", document_path=event.document_path, handled=False
            )
            return report.skip(f"no handler for {event.collection_group} {event.event_kind.value}")
        return await handler(self._context, event)


__all__ = ["RouteKey", "TriggerDispatcher", "default_routes"]
