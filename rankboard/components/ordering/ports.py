"""
Ordering component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from rankboard.domain.entities import RankedItem


class RankedItemRepoPort(Protocol):
    """Repository interface for ranked items."""

    def save(self, item: RankedItem) -> RankedItem:
        """Save or update item."""
        ...

    def get_by_id(self, item_id: UUID) -> RankedItem | None:
        """Get item by ID."""
        ...

    def list_lane(self, lane: str) -> list[RankedItem]:
        """List items in a lane, ordered by rank."""
        ...

    def delete(self, item_id: UUID) -> None:
        """Delete item."""
        ...
