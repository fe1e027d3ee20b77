"""Document lifecycle event delivered by the document store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventKind(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass
class TriggerEvent:
    """``(eventKind, beforeSnapshot?, afterSnapshot, documentPath)`` as received.

    ``document_path`` alternates collection names and document keys, e.g.
    ``chats/{chatId}/messages/{messageId}``.
    """

    event_kind: EventKind
    document_path: str
    after: dict[str, Any] = field(default_factory=dict)
    before: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        self.event_kind = EventKind(self.event_kind)
        if self.event_kind is EventKind.UPDATED and self.before is None:
            raise ValueError("Update events require the before snapshot")
        if len(self.segments) < 2 or len(self.segments) % 2:
            raise ValueError(f"Invalid document path: {self.document_path!r}")

    @property
    def segments(self) -> list[str]:
        return [segment for segment in self.document_path.strip("/").split("/") if segment]

    @property
    def collection_group(self) -> str:
        """Collection names only, e.g. ``chats/messages``."""

        return "/".join(self.segments[0::2])

    @property
    def document_id(self) -> str:
        return self.segments[-1]

    @property
    def parent_id(self) -> str | None:
        """Key of the parent document for sub-collection paths."""

        segments = self.segments
        if len(segments) < 4:
            return None
        return segments[-3]


__all__ = ["EventKind", "TriggerEvent"]
