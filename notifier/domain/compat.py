"""Compatibility rules for documents written with the legacy schema.

The canonical schema uses lower-case service types, review ``targetType``
values naming the service (``construction`` / ``renovation``) and derives the
receiver of a chat message from the chat ``participants`` list. Older
documents use capitalised service types, ``targetType == "provider"`` and an
explicit ``receiverId`` on the message. Every legacy read goes through this
module and is logged so the remaining documents can be migrated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .entities.service_provider import SERVICE_TYPES

logger = logging.getLogger(__name__)

LEGACY_PROVIDER_TARGET_TYPE = "provider"


@dataclass(frozen=True)
class ReviewTarget:
    """Provider-bearing review target resolved from ``targetType``."""

    service_type: str | None


def canonical_service_type(value: object, *, accept_legacy: bool = True) -> str | None:
    """Return the canonical service type for ``value`` or ``None`` if unknown."""

    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if stripped in SERVICE_TYPES:
        return stripped
    lowered = stripped.lower()
    if accept_legacy and lowered in SERVICE_TYPES:
        logger.info("Legacy service type %r read as %r", value, lowered)
        return lowered
    return None


def resolve_review_target(
    target_type: object, *, accept_legacy: bool = True
) -> ReviewTarget | None:
    """Return the review target when ``target_type`` identifies a provider.

    Returns ``None`` for every target type that does not notify anyone.
    """

    service_type = canonical_service_type(target_type, accept_legacy=accept_legacy)
    if service_type is not None:
        return ReviewTarget(service_type=service_type)
    if (
        accept_legacy
        and isinstance(target_type, str)
        and target_type.strip().lower() == LEGACY_PROVIDER_TARGET_TYPE
    ):
        logger.info("Legacy review target type %r accepted", target_type)
        return ReviewTarget(service_type=None)
    return None


def legacy_receiver_id(receiver_id: str | None, *, accept_legacy: bool = True) -> str | None:
    """Return an explicit message ``receiverId`` when the legacy schema is accepted."""

    if receiver_id is None or not accept_legacy:
        return None
    logger.info("Chat receiver taken from legacy receiverId field")
    return receiver_id


__all__ = [
    "LEGACY_PROVIDER_TARGET_TYPE",
    "ReviewTarget",
    "canonical_service_type",
    "legacy_receiver_id",
    "resolve_review_target",
]
