"""SQLAlchemy model for newsletter subscriptions."""

from sqlalchemy import Column, DateTime, Index, String, Text, text

from notifier.infrastructure.database import Base
from notifier.utils import storage_now

from ._ids import new_document_id

ACTIVE_ONLY = text("status = 'active'")


class EmailSubscriptionModel(Base):
    """Subscription record plus the outcome of its confirmation email."""

    __tablename__ = "email_subscriptions"
    __table_args__ = (
        # One active subscription per normalized address
        Index(
            "uq_email_subscriptions_active_email",
            "email",
            unique=True,
            sqlite_where=ACTIVE_ONLY,
            postgresql_where=ACTIVE_ONLY,
        ),
    )

    id = Column(String(64), primary_key=True, default=new_document_id)
    email = Column(String(254), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending", index=True)
    source = Column(String(60), nullable=False, default="footer")
    delivery_mode = Column(String(20), nullable=False, default="trigger")
    email_message_id = Column(String(255), nullable=True)
    email_channel = Column(String(30), nullable=True)
    email_error = Column(Text, nullable=True)
    email_sent_at = Column(DateTime(), nullable=True)
    email_failed_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["EmailSubscriptionModel"]
