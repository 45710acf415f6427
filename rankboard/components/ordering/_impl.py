"""
OrderingService - Ranked list maintenance for lanes.

Places and moves items by asking the rank allocator for a rank between the
item's new neighbours, then persists only that item.

Key behaviors:
- An empty lane starts at the alphabet's middle rank
- Placement at head/tail steps past the current first/last rank
- Moves resolve neighbours from a snapshot of the target lane
- No other item's rank is ever rewritten
- A corrupted snapshot (reversed or malformed neighbour ranks) is reported,
  never repaired
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from rankboard.components.ranking import (
    DEFAULT_ALPHABET,
    DEFAULT_MAX_RANK_LENGTH_WARNING,
    Alphabet,
    RankError,
    midpoint,
)
from rankboard.domain.entities import Placement, RankedItem, utcnow

from .models import OrderingValidationError
from .ports import RankedItemRepoPort

if TYPE_CHECKING:
    from rankboard.rules.models import Rules

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 200


# --- Configuration ---


@dataclass(frozen=True)
class OrderingConfig:
    """Ordering configuration from rules."""

    lanes: tuple[str, ...] = ("todo", "doing", "blocked", "done")
    default_lane: str = "todo"
    default_position: Placement = "tail"
    max_rank_length_warning: int = DEFAULT_MAX_RANK_LENGTH_WARNING


DEFAULT_CONFIG = OrderingConfig()


# --- Validation Functions ---


def validate_title(title: str | None) -> list[OrderingValidationError]:
    """Validate item title."""
    if not title or not title.strip():
        return [
            OrderingValidationError(
                code="title_required",
                message="Title is required",
                field="title",
            )
        ]
    if len(title) > MAX_TITLE_LENGTH:
        return [
            OrderingValidationError(
                code="title_too_long",
                message=f"Title must be {MAX_TITLE_LENGTH} characters or less",
                field="title",
            )
        ]
    return []


def validate_lane(
    lane: str,
    config: OrderingConfig = DEFAULT_CONFIG,
) -> list[OrderingValidationError]:
    """Validate that lane is configured."""
    if lane not in config.lanes:
        return [
            OrderingValidationError(
                code="lane_unknown",
                message=f"Lane '{lane}' is not one of: {', '.join(config.lanes)}",
                field="lane",
            )
        ]
    return []


def _rank_conflict(error: RankError) -> OrderingValidationError:
    return OrderingValidationError(
        code="rank_conflict",
        message=f"Neighbour ranks are inconsistent, reload the lane: {error}",
        field="rank",
    )


def _tied_neighbours(prev_item: RankedItem, next_item: RankedItem) -> OrderingValidationError:
    return OrderingValidationError(
        code="rank_conflict",
        message=(
            f"Items {prev_item.id} and {next_item.id} share rank '{prev_item.rank}'; "
            "move one of them before placing an item between them"
        ),
        field="rank",
    )


# --- Ordering Service ---


class OrderingService:
    """
    Ordering service.

    Maintains rank order of items within lanes.
    """

    def __init__(
        self,
        repo: RankedItemRepoPort,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        config: OrderingConfig = DEFAULT_CONFIG,
    ) -> None:
        """Initialize service."""
        self._repo = repo
        self._alphabet = alphabet
        self._config = config

    @property
    def lanes(self) -> tuple[str, ...]:
        return self._config.lanes

    # --- Queries ---

    def get(self, item_id: UUID) -> RankedItem | None:
        """Get item by ID."""
        return self._repo.get_by_id(item_id)

    def list_lane(self, lane: str) -> list[RankedItem]:
        """List a lane in display order."""
        return sorted(self._repo.list_lane(lane), key=RankedItem.sort_key)

    def board(self) -> dict[str, list[RankedItem]]:
        """All configured lanes in display order."""
        return {lane: self.list_lane(lane) for lane in self._config.lanes}

    def _warn_on_growth(self, item_id: UUID, lane: str, rank: str) -> None:
        limit = self._config.max_rank_length_warning
        if len(rank) > limit:
            logger.warning(
                "Rank of item %s in %s has length %d, exceeds %d; gap is densely packed",
                item_id,
                lane,
                len(rank),
                limit,
            )

    # --- Commands ---

    def place(
        self,
        title: str,
        lane: str | None = None,
        position: Placement | None = None,
    ) -> tuple[RankedItem | None, list[OrderingValidationError]]:
        """
        Create an item at the head or tail of a lane.

        Returns:
            Tuple of (item, errors). Item is None if validation fails.
        """
        lane = lane or self._config.default_lane
        position = position or self._config.default_position

        errors = validate_title(title) + validate_lane(lane, self._config)
        if position not in ("head", "tail"):
            errors.append(
                OrderingValidationError(
                    code="position_invalid",
                    message="Position must be 'head' or 'tail'",
                    field="position",
                )
            )
        if errors:
            return None, errors

        items = self.list_lane(lane)
        try:
            if not items:
                rank = midpoint(None, None, self._alphabet)
            elif position == "head":
                rank = midpoint(None, items[0].rank, self._alphabet)
            else:
                rank = midpoint(items[-1].rank, None, self._alphabet)
        except RankError as e:
            logger.warning("Cannot place item in lane %s: %s", lane, e)
            return None, [_rank_conflict(e)]

        item = RankedItem(lane=lane, rank=rank, title=title.strip())
        saved = self._repo.save(item)
        logger.info("Placed item %s at %s of %s with rank %s", saved.id, position, lane, rank)
        self._warn_on_growth(saved.id, lane, rank)
        return saved, []

    def move(
        self,
        item_id: UUID,
        lane: str,
        after_id: UUID | None = None,
        before_id: UUID | None = None,
    ) -> tuple[RankedItem | None, list[OrderingValidationError]]:
        """
        Move an item into lane, between its new neighbours.

        Args:
            item_id: Item being moved.
            lane: Target lane (may equal the current lane).
            after_id: Item the moved item should follow, if any.
            before_id: Item the moved item should precede, if any.

        With only one neighbour given, the other is taken from the current
        lane snapshot. With neither, the item goes to the tail.

        Returns:
            Tuple of (item, errors). Item is None if the move is rejected.
        """
        item = self._repo.get_by_id(item_id)
        if item is None:
            return None, [
                OrderingValidationError(
                    code="item_not_found",
                    message=f"Item with ID {item_id} not found",
                    field="item_id",
                )
            ]

        errors = validate_lane(lane, self._config)
        if errors:
            return None, errors

        for name, neighbour_id in (("after_id", after_id), ("before_id", before_id)):
            if neighbour_id is not None and neighbour_id == item_id:
                return None, [
                    OrderingValidationError(
                        code="invalid_neighbour",
                        message="An item cannot be its own neighbour",
                        field=name,
                    )
                ]

        snapshot = [i for i in self.list_lane(lane) if i.id != item_id]
        positions = {i.id: idx for idx, i in enumerate(snapshot)}

        for name, neighbour_id in (("after_id", after_id), ("before_id", before_id)):
            if neighbour_id is not None and neighbour_id not in positions:
                code = (
                    "neighbour_not_in_lane"
                    if self._repo.get_by_id(neighbour_id) is not None
                    else "neighbour_not_found"
                )
                return None, [
                    OrderingValidationError(
                        code=code,
                        message=f"Neighbour {neighbour_id} is not in lane '{lane}'",
                        field=name,
                    )
                ]

        prev_item: RankedItem | None
        next_item: RankedItem | None
        # An implied neighbour skips items tied with the given one.
        if after_id is not None:
            prev_item = snapshot[positions[after_id]]
            floor = prev_item.rank
            if before_id is not None:
                next_item = snapshot[positions[before_id]]
            else:
                next_item = next((i for i in snapshot if i.rank > floor), None)
        elif before_id is not None:
            next_item = snapshot[positions[before_id]]
            lower = [i for i in snapshot if i.rank < next_item.rank]
            prev_item = lower[-1] if lower else None
        else:
            prev_item = snapshot[-1] if snapshot else None
            next_item = None

        if prev_item and next_item and prev_item.rank == next_item.rank:
            logger.warning("Rejected move of %s into %s: neighbours are tied", item_id, lane)
            return None, [_tied_neighbours(prev_item, next_item)]

        try:
            rank = midpoint(
                prev_item.rank if prev_item else None,
                next_item.rank if next_item else None,
                self._alphabet,
            )
        except RankError as e:
            logger.warning("Rejected move of %s into %s: %s", item_id, lane, e)
            return None, [_rank_conflict(e)]

        from_lane = item.lane
        item.lane = lane
        item.rank = rank
        item.updated_at = utcnow()

        saved = self._repo.save(item)
        logger.info("Moved item %s from %s to %s with rank %s", item_id, from_lane, lane, rank)
        self._warn_on_growth(item_id, lane, rank)
        return saved, []

    def remove(self, item_id: UUID) -> tuple[bool, list[OrderingValidationError]]:
        """
        Delete an item.

        Returns:
            Tuple of (success, errors).
        """
        if self._repo.get_by_id(item_id) is None:
            return False, [
                OrderingValidationError(
                    code="item_not_found",
                    message=f"Item with ID {item_id} not found",
                    field="item_id",
                )
            ]

        self._repo.delete(item_id)
        logger.info("Removed item %s", item_id)
        return True, []


# --- Factory ---


def create_ordering_service(
    repo: RankedItemRepoPort,
    rules: Rules | None = None,
) -> OrderingService:
    """Create an ordering service configured from rules."""
    if rules is None:
        return OrderingService(repo=repo)

    config = OrderingConfig(
        lanes=tuple(rules.ordering.lanes),
        default_lane=rules.ordering.default_lane,
        default_position=rules.ordering.default_position,  # type: ignore[arg-type]
        max_rank_length_warning=rules.ranking.max_rank_length_warning,
    )
    return OrderingService(
        repo=repo,
        alphabet=Alphabet(rules.ranking.alphabet),
        config=config,
    )
