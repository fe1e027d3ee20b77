"""Use case for maintaining the admin role in the identity directory."""

from sqlalchemy.orm import Session

from notifier.domain.entities import ADMIN_ROLE, DEFAULT_ROLE, UserProfile
from notifier.infrastructure.repositories import UserRepository


def set_admin_role(session: Session, email: str, *, grant: bool = True) -> UserProfile:
    """Grant or revoke the admin role for the user registered with ``email``."""

    repository = UserRepository(session)
    user = repository.get_by_email(email)
    if user is None:
        msg = f"No user registered with email {email.strip()}"
        raise ValueError(msg)

    role = ADMIN_ROLE if grant else DEFAULT_ROLE
    if (user.role or "").lower() == role:
        return user
    return repository.set_role(user.id, role)


__all__ = ["set_admin_role"]
