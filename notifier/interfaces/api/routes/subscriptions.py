"""Endpoint for newsletter sign-ups with inline confirmation delivery."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notifier.application.context import PipelineContext
from notifier.application.use_cases.subscriptions import (
    ALREADY_EXISTS,
    INVALID_ARGUMENT,
    SubscriptionError,
    subscribe_email,
)
from notifier.interfaces.api.dependencies import get_pipeline_context
from notifier.interfaces.api.schemas import (
    SubscriptionCreate,
    SubscriptionErrorResponse,
    SubscriptionResponse,
)

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])

ERROR_STATUS_CODES = {
    INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}


@router.post(
    "",
    response_model=SubscriptionResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": SubscriptionErrorResponse},
        status.HTTP_409_CONFLICT: {"model": SubscriptionErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SubscriptionErrorResponse},
    },
)
async def create_subscription(
    payload: SubscriptionCreate,
    context: PipelineContext = Depends(get_pipeline_context),
) -> SubscriptionResponse | JSONResponse:
    """Subscribe an address and send its confirmation email before answering."""

    try:
        result = await subscribe_email(
            context.store,
            context.chain,
            payload.email,
            payload.source,
            subject=context.confirmation_subject,
        )
    except SubscriptionError as exc:
        body = SubscriptionErrorResponse(code=exc.code, message=exc.message)
        return JSONResponse(
            status_code=ERROR_STATUS_CODES.get(
                exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
            ),
            content=body.model_dump(),
        )

    return SubscriptionResponse(
        success=result.success,
        message=result.message,
        subscription_id=result.subscription_id,
    )
