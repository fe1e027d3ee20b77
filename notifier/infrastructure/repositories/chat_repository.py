"""Persistence helpers for chat documents."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notifier.domain.entities import Chat, SupportChat
from notifier.infrastructure.models import ChatModel, SupportChatModel


class ChatRepository:
    """Read the parent documents of chat messages."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_chat(self, chat_id: str) -> Chat | None:
        model = self.session.get(ChatModel, chat_id)
        if model is None:
            return None
        participants = [str(uid) for uid in (model.participants or []) if uid]
        return Chat(id=model.id, participants=participants)

    def get_support_chat(self, chat_id: str) -> SupportChat | None:
        model = self.session.get(SupportChatModel, chat_id)
        if model is None:
            return None
        return SupportChat(id=model.id, user_id=model.user_id, admin_id=model.admin_id)

    def create_chat(self, chat: Chat) -> Chat:
        self.session.add(ChatModel(id=chat.id, participants=list(chat.participants)))
        self.session.commit()
        return chat

    def create_support_chat(self, chat: SupportChat) -> SupportChat:
        self.session.add(
            SupportChatModel(id=chat.id, user_id=chat.user_id, admin_id=chat.admin_id)
        )
        self.session.commit()
        return chat


__all__ = ["ChatRepository"]
