"""Structured results produced by every step of the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Resolution:
    """Recipients resolved for one branch; ``error`` is set when a lookup failed."""

    recipients: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WriteResult:
    recipient_id: str
    notification_id: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class StepFailure:
    step: str
    detail: str


@dataclass
class HandlerReport:
    """Aggregated outcome of one handler invocation."""

    handler: str
    document_path: str
    notified: list[str] = field(default_factory=list)
    failures: list[StepFailure] = field(default_factory=list)
    skipped: str | None = None
    handled: bool = True

    def add_resolution(self, step: str, resolution: Resolution) -> None:
        if resolution.error:
            self.failures.append(StepFailure(step=step, detail=resolution.error))

    def add_writes(self, step: str, results: list[WriteResult]) -> None:
        for result in results:
            if result.ok:
                self.notified.append(result.recipient_id)
            else:
                self.failures.append(
                    StepFailure(step=step, detail=f"{result.recipient_id}: {result.error}")
                )

    def fail(self, step: str, detail: str) -> None:
        self.failures.append(StepFailure(step=step, detail=detail))

    def skip(self, reason: str) -> "HandlerReport":
        self.skipped = reason
        return self

    def to_dict(self) -> dict[str, object]:
        return {
            "handler": self.handler,
            "document_path": self.document_path,
            "handled": self.handled,
            "notified": list(self.notified),
            "failures": [
                {"step": failure.step, "detail": failure.detail} for failure in self.failures
            ],
            "skipped": self.skipped,
        }


__all__ = ["HandlerReport", "Resolution", "StepFailure", "WriteResult"]
