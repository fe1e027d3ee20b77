"""Persistence helpers for service provider records."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from notifier.domain.entities import ServiceProvider
from notifier.infrastructure.models import ServiceProviderModel


class ServiceProviderRepository:
    """Lookups used to resolve provider recipients."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, provider_id: str) -> ServiceProvider | None:
        model = self.session.get(ServiceProviderModel, provider_id)
        return self._to_entity(model) if model else None

    def list_approved(
        self, service_type: str, *, case_insensitive: bool = False
    ) -> list[ServiceProvider]:
        """Return approved providers offering ``service_type``.

        ``case_insensitive`` also matches records stored with a capitalised
        service type.
        """

        column = ServiceProviderModel.service_type
        condition = (
            func.lower(column) == service_type.lower()
            if case_insensitive
            else column == service_type
        )
        query = (
            self.session.query(ServiceProviderModel)
            .filter(condition)
            .filter(ServiceProviderModel.is_approved.is_(True))
            .order_by(ServiceProviderModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, provider: ServiceProvider) -> ServiceProvider:
        model = ServiceProviderModel(
            id=provider.id,
            user_id=provider.user_id,
            service_type=provider.service_type,
            business_name=provider.business_name,
            is_approved=provider.is_approved,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ServiceProviderModel) -> ServiceProvider:
        return ServiceProvider(
            id=model.id,
            user_id=model.user_id,
            service_type=model.service_type,
            is_approved=bool(model.is_approved),
            business_name=model.business_name,
        )


__all__ = ["ServiceProviderRepository"]
