"""Utility script to grant or revoke the admin role for a user."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from notifier.application.use_cases.users import set_admin_role
from notifier.infrastructure.database import SessionLocal, initialize_database


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the role change."""

    parser = argparse.ArgumentParser(
        description="Grant or revoke the admin role for a marketplace user.",
    )
    parser.add_argument("email", help="Email address of the user")
    parser.add_argument(
        "--revoke",
        action="store_true",
        help="Remove the admin role instead of granting it.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Apply the role change requested on the command line."""

    args = parse_args(argv)
    initialize_database()

    session = SessionLocal()
    try:
        user = set_admin_role(session, args.email, grant=not args.revoke)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not update the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the user to the database: {exc}") from exc
    else:
        print(
            "Role updated:\n"
            f"  ID: {user.id}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role or '-'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
