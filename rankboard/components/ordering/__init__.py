"""
Ordering component - Ranked lanes for drag-and-drop reordering.
"""

from ._impl import (
    DEFAULT_CONFIG,
    OrderingConfig,
    OrderingService,
    create_ordering_service,
    validate_lane,
    validate_title,
)
from .component import (
    run,
    run_board,
    run_get,
    run_list,
    run_move,
    run_place,
    run_remove,
)
from .models import (
    BoardOutput,
    GetBoardInput,
    GetItemInput,
    LaneOutput,
    ListLaneInput,
    MoveItemInput,
    OrderingOutput,
    OrderingValidationError,
    PlaceItemInput,
    RemoveItemInput,
)
from .ports import RankedItemRepoPort

__all__ = [
    # Entry points
    "run",
    "run_board",
    "run_get",
    "run_list",
    "run_move",
    "run_place",
    "run_remove",
    # Input models
    "GetBoardInput",
    "GetItemInput",
    "ListLaneInput",
    "MoveItemInput",
    "PlaceItemInput",
    "RemoveItemInput",
    # Output models
    "BoardOutput",
    "LaneOutput",
    "OrderingOutput",
    "OrderingValidationError",
    # Ports
    "RankedItemRepoPort",
    # Service
    "DEFAULT_CONFIG",
    "OrderingConfig",
    "OrderingService",
    "create_ordering_service",
    "validate_lane",
    "validate_title",
]
