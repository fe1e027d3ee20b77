"""Support channel documents: contact messages and support chats."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from notifier.domain.snapshots import optional_str


@dataclass
class SupportMessage:
    """Message submitted through the contact form."""

    id: str
    subject: str | None
    name: str | None

    @classmethod
    def from_snapshot(cls, message_id: str, snapshot: Mapping[str, Any]) -> "SupportMessage":
        return cls(
            id=message_id,
            subject=optional_str(snapshot.get("subject")),
            name=optional_str(snapshot.get("name")),
        )


@dataclass
class SupportChat:
    """Conversation between one user and the support team."""

    id: str
    user_id: str | None
    admin_id: str | None = None


@dataclass
class SupportChatMessage:
    id: str
    chat_id: str
    text: str | None
    is_admin: bool

    @classmethod
    def from_snapshot(
        cls, message_id: str, chat_id: str, snapshot: Mapping[str, Any]
    ) -> "SupportChatMessage":
        text = snapshot.get("text")
        return cls(
            id=message_id,
            chat_id=chat_id,
            text=text if isinstance(text, str) else None,
            is_admin=bool(snapshot.get("isAdmin", False)),
        )


__all__ = ["SupportChat", "SupportChatMessage", "SupportMessage"]
