"""SQLAlchemy models for direct chats and support chats."""

from sqlalchemy import JSON, Column, String

from notifier.infrastructure.database import Base

from ._ids import new_document_id


class ChatModel(Base):
    """Direct conversation between marketplace users."""

    __tablename__ = "chats"

    id = Column(String(64), primary_key=True, default=new_document_id)
    participants = Column(JSON, nullable=False, default=list)


class SupportChatModel(Base):
    """Conversation between a user and the support team."""

    __tablename__ = "support_chats"

    id = Column(String(64), primary_key=True, default=new_document_id)
    user_id = Column(String(64), nullable=True, index=True)
    admin_id = Column(String(64), nullable=True, index=True)


__all__ = ["ChatModel", "SupportChatModel"]
