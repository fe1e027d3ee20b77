"""Rating and comment left by a user."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from notifier.domain.snapshots import first_non_empty, optional_str

AUTHOR_ALIASES = ("authorId", "reviewerId", "userId")


@dataclass
class Review:
    id: str
    target_id: str | None
    target_type: str | None
    author_id: str | None
    rating: Any
    comment: str | None

    @classmethod
    def from_snapshot(cls, review_id: str, snapshot: Mapping[str, Any]) -> "Review":
        return cls(
            id=review_id,
            target_id=optional_str(snapshot.get("targetId")),
            target_type=optional_str(snapshot.get("targetType")),
            author_id=optional_str(first_non_empty(snapshot, *AUTHOR_ALIASES)),
            rating=snapshot.get("rating"),
            comment=optional_str(snapshot.get("comment")),
        )


__all__ = ["AUTHOR_ALIASES", "Review"]
