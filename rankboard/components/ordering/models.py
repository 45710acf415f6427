"""
Ordering component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from rankboard.domain.entities import Placement, RankedItem

# --- Validation Errors ---


@dataclass(frozen=True)
class OrderingValidationError:
    """Ordering validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class PlaceItemInput:
    """Input for placing a new item at the head or tail of a lane."""

    title: str
    lane: str | None = None
    position: Placement | None = None


@dataclass(frozen=True)
class MoveItemInput:
    """
    Input for moving an item.

    after_id names the item the moved item should follow; before_id the item
    it should precede. With neither the item goes to the tail of the lane.
    """

    item_id: UUID
    lane: str
    after_id: UUID | None = None
    before_id: UUID | None = None


@dataclass(frozen=True)
class RemoveItemInput:
    """Input for removing an item."""

    item_id: UUID


@dataclass(frozen=True)
class GetItemInput:
    """Input for getting an item."""

    item_id: UUID


@dataclass(frozen=True)
class ListLaneInput:
    """Input for listing a lane in display order."""

    lane: str


@dataclass(frozen=True)
class GetBoardInput:
    """Input for listing every lane."""

    pass


# --- Output Models ---


@dataclass(frozen=True)
class OrderingOutput:
    """Output from an item operation."""

    item: RankedItem | None
    errors: list[OrderingValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LaneOutput:
    """Output from list operation."""

    lane: str
    items: tuple[RankedItem, ...]
    total: int
    errors: list[OrderingValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class BoardOutput:
    """Every configured lane in display order."""

    lanes: dict[str, tuple[RankedItem, ...]]
