"""Wrap handler bodies so they always return a report and never raise."""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from notifier.domain.entities import HandlerReport, TriggerEvent

if TYPE_CHECKING:
    from notifier.application.context import PipelineContext

logger = logging.getLogger(__name__)

HandlerBody = Callable[["PipelineContext", TriggerEvent, HandlerReport], Awaitable[None]]
Handler = Callable[["PipelineContext", TriggerEvent], Awaitable[HandlerReport]]


def emit_report(report: HandlerReport) -> None:
    """Send the aggregated outcome of a handler to the log sink."""

    for failure in report.failures:
        logger.warning(
            "%s [%s] step %s failed: %s",
            report.handler,
            report.document_path,
            failure.step,
            failure.detail,
        )
    if report.skipped:
        logger.info("%s [%s] skipped: %s", report.handler, report.document_path, report.skipped)
        return
    logger.info(
        "%s [%s] notified %d recipient(s), %d failure(s)",
        report.handler,
        report.document_path,
        len(report.notified),
        len(report.failures),
    )


def event_handler(name: str) -> Callable[[HandlerBody], Handler]:
    """Turn ``body(context, event, report)`` into a handler returning the report."""

    def decorator(body: HandlerBody) -> Handler:
        @functools.wraps(body)
        async def wrapper(context: "PipelineContext", event: TriggerEvent) -> HandlerReport:
            report = HandlerReport(handler=name, document_path=event.document_path)
            try:
                await body(context, event, report)
            except Exception as exc:
                logger.exception("Error in %s for %s", name, event.document_path)
                report.fail("handler", str(exc) or exc.__class__.__name__)
            emit_report(report)
            return report

        return wrapper

    return decorator


__all__ = ["Handler", "emit_report", "event_handler"]
