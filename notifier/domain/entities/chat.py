"""Direct chat between two marketplace users."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from notifier.domain.snapshots import optional_str


@dataclass
class Chat:
    id: str
    participants: list[str] = field(default_factory=list)

    def other_participant(self, sender_id: str | None) -> str | None:
        """Return the first participant that is not ``sender_id``."""

        for participant in self.participants:
            if participant and participant != sender_id:
                return participant
        return None


@dataclass
class ChatMessage:
    """Message posted inside a chat; ``receiver_id`` only exists on legacy documents."""

    id: str
    chat_id: str
    sender_id: str | None
    text: str | None
    receiver_id: str | None = None

    @classmethod
    def from_snapshot(
        cls, message_id: str, chat_id: str, snapshot: Mapping[str, Any]
    ) -> "ChatMessage":
        text = snapshot.get("text")
        return cls(
            id=message_id,
            chat_id=chat_id,
            sender_id=optional_str(snapshot.get("senderId")),
            text=text if isinstance(text, str) else None,
            receiver_id=optional_str(snapshot.get("receiverId")),
        )


__all__ = ["Chat", "ChatMessage"]
