"""SQLAlchemy model for identity directory profiles."""

from sqlalchemy import Column, DateTime, String, func

from notifier.infrastructure.database import Base

from ._ids import new_document_id


class UserModel(Base):
    """Database representation of a marketplace identity."""

    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=new_document_id)
    role = Column(String(30), nullable=True, index=True)
    name = Column(String(120), nullable=True)
    display_name = Column(String(120), nullable=True)
    email = Column(String(254), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["UserModel"]
