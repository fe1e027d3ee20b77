"""Property listing as received from the document store."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from notifier.domain.snapshots import first_non_empty, optional_str

OWNER_ALIASES = ("ownerId", "userId", "submitterId")


@dataclass
class Listing:
    """A property submitted for admin approval."""

    id: str
    title: str | None
    owner_id: str | None

    @classmethod
    def from_snapshot(cls, listing_id: str, snapshot: Mapping[str, Any]) -> "Listing":
        return cls(
            id=listing_id,
            title=optional_str(snapshot.get("title")),
            owner_id=optional_str(first_non_empty(snapshot, *OWNER_ALIASES)),
        )


__all__ = ["Listing", "OWNER_ALIASES"]
