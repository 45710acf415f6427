"""
Ordering component - Ranked lanes for drag-and-drop reordering.

Handles placing, moving, listing and removing ranked items.

Shell Layer - handles I/O and error conversion.

Invariants:
- I1: A lane sorted by rank is its display order
- I2: A place or move rewrites only the rank of the item concerned
- I3: Items only live in configured lanes
"""

from __future__ import annotations

from ._impl import OrderingService
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

# --- Shell Layer Functions ---


def run_place(
    input_data: PlaceItemInput,
    service: OrderingService,
) -> OrderingOutput:
    """Place a new item at the head or tail of a lane."""
    item, errors = service.place(
        title=input_data.title,
        lane=input_data.lane,
        position=input_data.position,
    )

    return OrderingOutput(
        item=item,
        errors=errors,
        success=item is not None,
    )


def run_move(
    input_data: MoveItemInput,
    service: OrderingService,
) -> OrderingOutput:
    """Move an item between neighbours, possibly into another lane."""
    item, errors = service.move(
        item_id=input_data.item_id,
        lane=input_data.lane,
        after_id=input_data.after_id,
        before_id=input_data.before_id,
    )

    return OrderingOutput(
        item=item,
        errors=errors,
        success=item is not None,
    )


def run_remove(
    input_data: RemoveItemInput,
    service: OrderingService,
) -> OrderingOutput:
    """Remove an item."""
    success, errors = service.remove(input_data.item_id)

    return OrderingOutput(
        item=None,
        errors=errors,
        success=success,
    )


def run_get(
    input_data: GetItemInput,
    service: OrderingService,
) -> OrderingOutput:
    """Get an item by ID."""
    item = service.get(input_data.item_id)

    if item is None:
        return OrderingOutput(
            item=None,
            errors=[
                OrderingValidationError(
                    code="item_not_found",
                    message=f"Item with ID {input_data.item_id} not found",
                    field="item_id",
                )
            ],
            success=False,
        )

    return OrderingOutput(item=item, errors=[], success=True)


def run_list(
    input_data: ListLaneInput,
    service: OrderingService,
) -> LaneOutput:
    """List a lane in display order."""
    if input_data.lane not in service.lanes:
        return LaneOutput(
            lane=input_data.lane,
            items=(),
            total=0,
            errors=[
                OrderingValidationError(
                    code="lane_unknown",
                    message=f"Lane '{input_data.lane}' is not configured",
                    field="lane",
                )
            ],
            success=False,
        )

    items = tuple(service.list_lane(input_data.lane))
    return LaneOutput(lane=input_data.lane, items=items, total=len(items))


def run_board(
    input_data: GetBoardInput,
    service: OrderingService,
) -> BoardOutput:
    """List every configured lane."""
    return BoardOutput(
        lanes={lane: tuple(items) for lane, items in service.board().items()}
    )


def run(
    inp: (
        PlaceItemInput
        | MoveItemInput
        | RemoveItemInput
        | GetItemInput
        | ListLaneInput
        | GetBoardInput
    ),
    service: OrderingService,
) -> OrderingOutput | LaneOutput | BoardOutput:
    """
    Main entry point for the ordering component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, PlaceItemInput):
        return run_place(inp, service)
    elif isinstance(inp, MoveItemInput):
        return run_move(inp, service)
    elif isinstance(inp, RemoveItemInput):
        return run_remove(inp, service)
    elif isinstance(inp, GetItemInput):
        return run_get(inp, service)
    elif isinstance(inp, ListLaneInput):
        return run_list(inp, service)
    elif isinstance(inp, GetBoardInput):
        return run_board(inp, service)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
