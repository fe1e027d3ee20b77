"""Document key generation shared by all models."""

from uuid import uuid4


def new_document_id() -> str:
    """Return a random document key."""

    return uuid4().hex


__all__ = ["new_document_id"]
