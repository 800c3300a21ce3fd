"""Column reordering on a board."""

from dataclasses import replace

from dragboard.errors import invariant
from dragboard.model.board import Board, column_index
from dragboard.model.outcome import ColumnReorder
from dragboard.model.reorder import AFTER, BEFORE, HORIZONTAL, Edge, reorder_with_edge


def reorder_column(
    board: Board,
    start_index: int,
    finish_index: int,
    edge: Edge | None = None,
) -> Board:
    """Move the column at start_index next to the column at finish_index.

    Returns board unchanged if the order would not change.
    """
    ordered = board.ordered_column_ids
    invariant(0 <= start_index < len(ordered), f"Column index {start_index} out of range")
    invariant(0 <= finish_index < len(ordered), f"Column index {finish_index} out of range")

    new_order = reorder_with_edge(ordered, start_index, finish_index, edge, HORIZONTAL)
    if new_order == list(ordered):
        return board

    outcome = ColumnReorder(
        column_id=ordered[start_index],
        start_index=start_index,
        finish_index=new_order.index(ordered[start_index]),
    )
    return replace(board, ordered_column_ids=tuple(new_order), last_operation=outcome)


def move_column_left(board: Board, column_id: str) -> Board:
    """Swap column_id with its left neighbour. No-op for the first column."""
    index = column_index(board, column_id)
    if index == 0:
        return board
    return reorder_column(board, index, index - 1, BEFORE)


def move_column_right(board: Board, column_id: str) -> Board:
    """Swap column_id with its right neighbour. No-op for the last column."""
    index = column_index(board, column_id)
    if index == len(board.ordered_column_ids) - 1:
        return board
    return reorder_column(board, index, index + 1, AFTER)
