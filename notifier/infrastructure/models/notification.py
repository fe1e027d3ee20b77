"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import expression

from notifier.infrastructure.database import Base
from notifier.utils import storage_now

from ._ids import new_document_id


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notifications"

    id = Column(String(64), primary_key=True, default=new_document_id)
    recipient_id = Column(String(64), nullable=False, index=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    category = Column(String(30), nullable=False, default="info")
    read = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    link = Column(String(255), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["NotificationModel"]
