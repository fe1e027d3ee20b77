"""Persistence helpers for newsletter subscriptions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notifier.domain.entities import (
    SUBSCRIPTION_STATUS_ACTIVE,
    EmailSubscription,
)
from notifier.infrastructure.models import EmailSubscriptionModel, new_document_id
from notifier.utils import from_storage, now_in_app_timezone, to_storage


class DuplicateActiveSubscriptionError(ValueError):
    """Raised when activating a record would give an address a second active row."""

    def __init__(self, email: str) -> None:
        super().__init__(f"{email} already has an active subscription")
        self.email = email


class EmailSubscriptionRepository:
    """Store subscriptions and the state transitions of their confirmation email."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, subscription_id: str) -> EmailSubscription | None:
        model = self.session.get(EmailSubscriptionModel, subscription_id)
        return self._to_entity(model) if model else None

    def get_active_by_email(
        self, email: str, *, exclude_id: str | None = None
    ) -> EmailSubscription | None:
        query = (
            self.session.query(EmailSubscriptionModel)
            .filter(EmailSubscriptionModel.email == email)
            .filter(EmailSubscriptionModel.status == SUBSCRIPTION_STATUS_ACTIVE)
        )
        if exclude_id is not None:
            query = query.filter(EmailSubscriptionModel.id != exclude_id)
        model = query.order_by(EmailSubscriptionModel.created_at).first()
        return self._to_entity(model) if model else None

    def list_by_email(self, email: str) -> list[EmailSubscription]:
        query = (
            self.session.query(EmailSubscriptionModel)
            .filter(EmailSubscriptionModel.email == email)
            .order_by(EmailSubscriptionModel.created_at)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, subscription: EmailSubscription) -> EmailSubscription:
        model = EmailSubscriptionModel(
            id=subscription.id or new_document_id(),
            email=subscription.email,
            status=subscription.status,
            source=subscription.source,
            delivery_mode=subscription.delivery_mode,
            created_at=to_storage(
                subscription.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_active(
        self,
        subscription_id: str,
        *,
        channel: str,
        message_id: str,
        sent_at: datetime,
    ) -> EmailSubscription:
        """Activate the record unless its address already has an active one.

        The check is repeated by the partial unique index on ``email`` so two
        concurrent activations cannot both commit.
        """

        model = self._require(subscription_id)
        email = model.email
        if self.get_active_by_email(email, exclude_id=model.id) is not None:
            raise DuplicateActiveSubscriptionError(email)

        model.status = SUBSCRIPTION_STATUS_ACTIVE
        model.email_channel = channel
        model.email_message_id = message_id
        model.email_sent_at = to_storage(sent_at)
        model.email_error = None
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateActiveSubscriptionError(email) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_failed(
        self,
        subscription_id: str,
        *,
        error: str,
        failed_at: datetime,
    ) -> EmailSubscription:
        """Record a delivery failure; an active record is left untouched."""

        model = self._require(subscription_id)
        if model.status == SUBSCRIPTION_STATUS_ACTIVE:
            return self._to_entity(model)
        model.email_error = error
        model.email_failed_at = to_storage(failed_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _require(self, subscription_id: str) -> EmailSubscriptionModel:
        model = self.session.get(EmailSubscriptionModel, subscription_id)
        if model is None:
            msg = f"Subscription with id {subscription_id} not found"
            raise ValueError(msg)
        return model

    @staticmethod
    def _to_entity(model: EmailSubscriptionModel) -> EmailSubscription:
        return EmailSubscription(
            id=model.id,
            email=model.email,
            status=model.status,
            source=model.source,
            delivery_mode=model.delivery_mode,
            email_message_id=model.email_message_id,
            email_channel=model.email_channel,
            email_error=model.email_error,
            email_sent_at=from_storage(model.email_sent_at),
            email_failed_at=from_storage(model.email_failed_at),
            created_at=from_storage(model.created_at),
        )


__all__ = ["DuplicateActiveSubscriptionError", "EmailSubscriptionRepository"]
