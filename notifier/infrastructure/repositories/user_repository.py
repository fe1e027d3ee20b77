"""Persistence layer for identity directory profiles."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from notifier.domain.entities import UserProfile
from notifier.infrastructure.models import UserModel


class UserRepository:
    """Read and maintain identity directory profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> UserProfile | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> UserProfile | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_ids_by_role(self, role: str) -> list[str]:
        query = (
            self.session.query(UserModel.id)
            .filter(func.lower(UserModel.role) == role.lower())
            .order_by(UserModel.id)
        )
        return [user_id for (user_id,) in query.all()]

    def create(self, user: UserProfile) -> UserProfile:
        model = UserModel(
            id=user.id,
            role=user.role,
            name=user.name,
            display_name=user.display_name,
            email=user.email,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_role(self, user_id: str, role: str | None) -> UserProfile:
        model = self.session.get(UserModel, user_id)
        if model is None:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        model.role = role
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> UserProfile:
        return UserProfile(
            id=model.id,
            role=model.role,
            name=model.name,
            display_name=model.display_name,
            email=model.email,
        )


__all__ = ["UserRepository"]
