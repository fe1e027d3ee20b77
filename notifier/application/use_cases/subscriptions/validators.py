"""Validation helpers for newsletter sign-ups."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
MAX_SOURCE_LENGTH = 60
INVALID_SOURCE_MESSAGE = f"Source must be text of at most {MAX_SOURCE_LENGTH} characters"


def normalize_email(email: str) -> str:
    """Return the duplicate-detection key for ``email``."""

    return email.strip().lower()


def ensure_valid_email(email: object) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    if not isinstance(email, str) or not email.strip():
        raise ValueError(INVALID_EMAIL_MESSAGE)

    normalized = normalize_email(email)
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError(INVALID_EMAIL_MESSAGE)
    return normalized


def ensure_valid_source(source: object) -> str | None:
    """Return the stripped sign-up source, ``None`` when absent, or raise ``ValueError``."""

    if source is None:
        return None
    if not isinstance(source, str) or len(source.strip()) > MAX_SOURCE_LENGTH:
        raise ValueError(INVALID_SOURCE_MESSAGE)
    return source.strip() or None
