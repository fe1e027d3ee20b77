"""Pydantic models describing newsletter subscription payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionCreate(BaseModel):
    """Sign-up request.

    Fields are taken as sent so every malformed value is rejected by the use
    case with ``invalid-argument`` instead of a validation error body.
    """

    email: Any = Field(default=None, description="Email address to subscribe")
    source: Any = Field(default=None, description="Where the sign-up form was shown")


class SubscriptionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    subscription_id: str = Field(serialization_alias="subscriptionId")


class SubscriptionErrorResponse(BaseModel):
    code: str
    message: str


__all__ = ["SubscriptionCreate", "SubscriptionErrorResponse", "SubscriptionResponse"]
