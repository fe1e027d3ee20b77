"""Construction or renovation request placed by a client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from notifier.domain.snapshots import as_number, first_non_empty, optional_str

SUBMITTER_ALIASES = ("submitterId", "userId", "clientId")


@dataclass
class ServiceRequest:
    """Paid service request; ``provider_id`` empty means broadcast."""

    id: str
    service_type: str
    submitter_id: str | None
    provider_id: str | None
    status: str | None
    budget: float

    @classmethod
    def from_snapshot(
        cls, request_id: str, service_type: str, snapshot: Mapping[str, Any]
    ) -> "ServiceRequest":
        status = snapshot.get("status")
        return cls(
            id=request_id,
            service_type=service_type,
            submitter_id=optional_str(first_non_empty(snapshot, *SUBMITTER_ALIASES)),
            provider_id=optional_str(snapshot.get("providerId")),
            status=None if status is None else str(status),
            budget=as_number(snapshot.get("budget")),
        )

    @property
    def is_assigned(self) -> bool:
        return self.provider_id is not None


def status_changed(before: ServiceRequest, after: ServiceRequest) -> bool:
    """Return ``True`` when the persisted status differs textually."""

    return before.status != after.status


__all__ = [
    "ServiceRequest",
    "SUBMITTER_ALIASES",
    "status_changed",
]
