"""Reorder a list by moving one element, optionally relative to an edge."""

from __future__ import annotations

from typing import Literal, Sequence, TypeVar

from dragboard.errors import invariant

T = TypeVar("T")

Edge = Literal["before", "after"]
Axis = Literal["vertical", "horizontal"]

BEFORE: Edge = "before"
AFTER: Edge = "after"

VERTICAL: Axis = "vertical"
HORIZONTAL: Axis = "horizontal"

# Hitbox edge names as reported by pointer geometry.
HITBOX_EDGES: dict[str, tuple[Edge, Axis]] = {
    "top": (BEFORE, VERTICAL),
    "bottom": (AFTER, VERTICAL),
    "left": (BEFORE, HORIZONTAL),
    "right": (AFTER, HORIZONTAL),
}


def edge_from_hitbox(name: str | None) -> Edge | None:
    """Map a hitbox edge (top/bottom/left/right) or before/after to an Edge.

    None passes through unchanged.
    """
    if name is None:
        return None
    if name in (BEFORE, AFTER):
        return name
    invariant(name in HITBOX_EDGES, f"Unknown edge {name!r}")
    return HITBOX_EDGES[name][0]


def reorder(items: Sequence[T], start_index: int, finish_index: int) -> list[T]:
    """Move the element at start_index so it ends up at finish_index."""
    result = list(items)
    moved = result.pop(start_index)
    result.insert(finish_index, moved)
    return result


def reorder_destination_index(
    start_index: int,
    index_of_target: int,
    edge: Edge | None = None,
    axis: Axis = VERTICAL,
) -> int:
    """Return where the element at start_index lands after the move.

    The target index is given in the list as it was before the element
    was removed. Moving forward shifts everything after start_index down
    by one, so "before" the target means one slot earlier. axis only
    records which geometry produced the edge.
    """
    if start_index == index_of_target:
        return start_index
    if edge is None:
        return index_of_target

    going_after = edge == AFTER
    if start_index < index_of_target:
        return index_of_target if going_after else index_of_target - 1
    return index_of_target + 1 if going_after else index_of_target


def reorder_with_edge(
    items: Sequence[T],
    start_index: int,
    index_of_target: int,
    edge: Edge | None = None,
    axis: Axis = VERTICAL,
) -> list[T]:
    """Move items[start_index] next to items[index_of_target].

    index_of_target may equal len(items) to append (only meaningful
    with no edge). Raises InvariantError for out-of-range indices.
    """
    invariant(0 <= start_index < len(items), f"start index {start_index} out of range for {len(items)} items")
    invariant(
        0 <= index_of_target <= len(items),
        f"target index {index_of_target} out of range for {len(items)} items",
    )
    finish_index = reorder_destination_index(start_index, index_of_target, edge, axis)
    return reorder(items, start_index, finish_index)
