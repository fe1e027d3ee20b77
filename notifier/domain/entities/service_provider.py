"""Domain entity describing a business that performs paid services."""

from __future__ import annotations

from dataclasses import dataclass

SERVICE_TYPE_CONSTRUCTION = "construction"
SERVICE_TYPE_RENOVATION = "renovation"
SERVICE_TYPES = (SERVICE_TYPE_CONSTRUCTION, SERVICE_TYPE_RENOVATION)


@dataclass
class ServiceProvider:
    """Provider record; notifications always go to ``user_id``, never to ``id``."""

    id: str
    user_id: str | None
    service_type: str | None
    is_approved: bool
    business_name: str | None = None


__all__ = [
    "SERVICE_TYPE_CONSTRUCTION",
    "SERVICE_TYPE_RENOVATION",
    "SERVICE_TYPES",
    "ServiceProvider",
]
