"""Endpoint receiving document lifecycle events from the document store."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from notifier.application.dispatcher import TriggerDispatcher
from notifier.domain.entities import TriggerEvent
from notifier.interfaces.api.dependencies import get_dispatcher
from notifier.interfaces.api.schemas import HandlerReportRead, TriggerEventPayload

router = APIRouter(prefix="/triggers", tags=["triggers"])


@router.post("", response_model=HandlerReportRead, status_code=status.HTTP_202_ACCEPTED)
async def receive_trigger(
    payload: TriggerEventPayload,
    dispatcher: TriggerDispatcher = Depends(get_dispatcher),
) -> HandlerReportRead:
    """Run the handler registered for the event and return its report."""

    try:
        event = TriggerEvent(
            event_kind=payload.event_kind,
            document_path=payload.document_path,
            after=payload.after,
            before=payload.before,
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc

    report = await dispatcher.dispatch(event)
    return HandlerReportRead.from_report(report)
