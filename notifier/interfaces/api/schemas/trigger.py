"""Pydantic models for document lifecycle events posted to the API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from notifier.domain.entities import EventKind, HandlerReport


class TriggerEventPayload(BaseModel):
    """Event as emitted by the document store; camelCase keys are accepted."""

    model_config = ConfigDict(populate_by_name=True)

    event_kind: EventKind = Field(alias="eventKind")
    document_path: str = Field(alias="documentPath", min_length=3)
    after: dict[str, Any] = Field(default_factory=dict, alias="afterSnapshot")
    before: dict[str, Any] | None = Field(default=None, alias="beforeSnapshot")

    @model_validator(mode="after")
    def _require_before_for_updates(self) -> "TriggerEventPayload":
        if self.event_kind is EventKind.UPDATED and self.before is None:
            raise ValueError("Update events require the before snapshot")
        return self


class StepFailureRead(BaseModel):
    step: str
    detail: str


class HandlerReportRead(BaseModel):
    """Outcome of the handler selected for the event."""

    handler: str
    document_path: str
    handled: bool
    notified: list[str] = Field(default_factory=list)
    failures: list[StepFailureRead] = Field(default_factory=list)
    skipped: str | None = None

    @classmethod
    def from_report(cls, report: HandlerReport) -> "HandlerReportRead":
        return cls.model_validate(report.to_dict())


__all__ = ["HandlerReportRead", "StepFailureRead", "TriggerEventPayload"]
