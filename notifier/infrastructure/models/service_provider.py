"""SQLAlchemy model for service provider records."""

from sqlalchemy import Boolean, Column, ForeignKey, String
from sqlalchemy.sql import expression

from notifier.infrastructure.database import Base

from ._ids import new_document_id


class ServiceProviderModel(Base):
    """Construction or renovation business operated by a user."""

    __tablename__ = "service_providers"

    id = Column(String(64), primary_key=True, default=new_document_id)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=True, index=True)
    service_type = Column(String(30), nullable=True, index=True)
    business_name = Column(String(150), nullable=True)
    is_approved = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["ServiceProviderModel"]
