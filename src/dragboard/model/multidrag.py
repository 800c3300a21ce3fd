"""Move several selected cards at once.

Selected cards are pulled out of every column, put into a canonical
order (dragged card first, the rest by board position) and spliced back
into the destination column as one contiguous run.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from dragboard.errors import invariant
from dragboard.model.board import Board, find_item, get_column, get_columns, item_position, with_columns
from dragboard.model.outcome import MultiCardDrag


def sort_selected_ids(board: Board, selected_ids: Sequence[str], dragged_id: str) -> tuple[str, ...]:
    """Order selected ids: dragged_id first, then by column then index."""
    positions = {item_id: item_position(board, item_id) for item_id in selected_ids}

    def compare(a: str, b: str) -> int:
        if a == dragged_id:
            return -1
        if b == dragged_id:
            return 1
        if positions[a] != positions[b]:
            return -1 if positions[a] < positions[b] else 1
        return -1

    return tuple(sorted(selected_ids, key=cmp_to_key(compare)))


def multi_drop_index(
    board: Board,
    selected_ids: Sequence[str],
    destination_column_id: str,
    insert_at: int,
) -> int:
    """Translate a drop slot into an index in the column after removal.

    insert_at is the slot in the destination column as it is now, before
    the selected cards are taken out. Every selected card sitting above
    that slot disappears first, so the slot moves up by that many.
    """
    destination = get_column(board, destination_column_id)
    selected = set(selected_ids)
    above = sum(1 for item in destination.items[:insert_at] if item.item_id in selected)
    return max(0, insert_at - above)


def multi_drag_reorder(
    board: Board,
    selected_ids: Sequence[str],
    dragged_id: str,
    destination_column_id: str,
    final_index: int,
) -> Board:
    """Move every selected card into destination_column_id at final_index.

    final_index is relative to the destination column with the selected
    cards already removed; see multi_drop_index. Returns board unchanged
    if nothing would move.
    """
    invariant(selected_ids, "Nothing selected to drag")
    invariant(dragged_id in selected_ids, f"Dragged item {dragged_id!r} is not selected")
    invariant(len(set(selected_ids)) == len(selected_ids), f"Duplicate ids in selection {list(selected_ids)}")
    get_column(board, destination_column_id)

    ordered_ids = sort_selected_ids(board, selected_ids, dragged_id)
    ordered_items = [find_item(board, item_id) for item_id in ordered_ids]

    selected = set(selected_ids)
    removed = {
        column.column_id: [item for item in column.items if item.item_id not in selected]
        for column in get_columns(board)
    }

    destination_items = removed[destination_column_id]
    invariant(
        0 <= final_index <= len(destination_items),
        f"Final index {final_index} out of range in column {destination_column_id!r}",
    )
    destination_items[final_index:final_index] = ordered_items

    updated = [
        column.with_items(removed[column.column_id])
        for column in get_columns(board)
        if list(column.items) != removed[column.column_id]
    ]
    if not updated:
        return board

    outcome = MultiCardDrag(
        selected_ids=ordered_ids,
        dragged_id=dragged_id,
        destination_column_id=destination_column_id,
        final_index=final_index,
    )
    return with_columns(board, updated, outcome)
