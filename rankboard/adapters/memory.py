"""
In-memory ranked item repository.

Stores copies so callers see the same snapshot semantics as a database.
"""

from __future__ import annotations

import threading
from uuid import UUID

from rankboard.domain.entities import RankedItem


class InMemoryRankedItemRepo:
    """Dict-backed repository for ranked items."""

    def __init__(self) -> None:
        self._items: dict[UUID, RankedItem] = {}
        self._lock = threading.Lock()

    def save(self, item: RankedItem) -> RankedItem:
        with self._lock:
            self._items[item.id] = item.model_copy()
        return item

    def get_by_id(self, item_id: UUID) -> RankedItem | None:
        with self._lock:
            item = self._items.get(item_id)
            return item.model_copy() if item else None

    def list_lane(self, lane: str) -> list[RankedItem]:
        with self._lock:
            items = [i.model_copy() for i in self._items.values() if i.lane == lane]
        return sorted(items, key=RankedItem.sort_key)

    def delete(self, item_id: UUID) -> None:
        with self._lock:
            self._items.pop(item_id, None)
