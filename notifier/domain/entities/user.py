"""Domain entity representing an identity directory profile."""

from dataclasses import dataclass

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "user"


@dataclass
class UserProfile:
    """Read-only view of a user as returned by the identity directory."""

    id: str
    role: str | None
    name: str | None
    display_name: str | None
    email: str | None

    def display_label(self, default: str) -> str:
        """Return the name shown to other users, or ``default``."""

        return self.name or self.display_name or default


__all__ = ["ADMIN_ROLE", "DEFAULT_ROLE", "UserProfile"]
