from .subscription import (
    SubscriptionCreate,
    SubscriptionErrorResponse,
    SubscriptionResponse,
)
from .trigger import HandlerReportRead, StepFailureRead, TriggerEventPayload

__all__ = [
    "HandlerReportRead",
    "StepFailureRead",
    "SubscriptionCreate",
    "SubscriptionErrorResponse",
    "SubscriptionResponse",
    "TriggerEventPayload",
]
