"""Card reordering within a column and moves between columns."""

from dragboard.errors import invariant
from dragboard.model.board import Board, find_home_column, get_column, with_columns
from dragboard.model.outcome import CardMove, CardReorder
from dragboard.model.reorder import AFTER, BEFORE, VERTICAL, Edge, reorder_with_edge


def reorder_card(
    board: Board,
    column_id: str,
    start_index: int,
    finish_index: int,
    edge: Edge | None = None,
) -> Board:
    """Reorder a card within column_id.

    finish_index is the index of the card dropped on (or the slot to
    move to exactly when edge is None). Returns board unchanged if the
    column order would not change.
    """
    column = get_column(board, column_id)
    new_items = reorder_with_edge(column.items, start_index, finish_index, edge, VERTICAL)
    if new_items == list(column.items):
        return board

    outcome = CardReorder(
        column_id=column_id,
        start_index=start_index,
        finish_index=new_items.index(column.items[start_index]),
    )
    return with_columns(board, [column.with_items(new_items)], outcome)


def move_card(
    board: Board,
    start_column_id: str,
    finish_column_id: str,
    item_index_in_start_column: int,
    item_index_in_finish_column: int | None = None,
) -> Board:
    """Move one card from start_column_id into finish_column_id.

    The card goes to the front of the destination unless an index is
    given. Moving within one column is not a cross-column move and
    returns board unchanged; use reorder_card for that.
    """
    if start_column_id == finish_column_id:
        return board

    source = get_column(board, start_column_id)
    destination = get_column(board, finish_column_id)
    invariant(
        0 <= item_index_in_start_column < len(source.items),
        f"Item index {item_index_in_start_column} out of range in column {start_column_id!r}",
    )
    new_index = item_index_in_finish_column if item_index_in_finish_column is not None else 0
    invariant(
        0 <= new_index <= len(destination.items),
        f"Item index {new_index} out of range in column {finish_column_id!r}",
    )

    item = source.items[item_index_in_start_column]
    source_items = [i for i in source.items if i.item_id != item.item_id]
    destination_items = list(destination.items)
    destination_items.insert(new_index, item)

    outcome = CardMove(
        finish_column_id=finish_column_id,
        item_index_in_start_column=item_index_in_start_column,
        item_index_in_finish_column=new_index,
    )
    return with_columns(
        board,
        [source.with_items(source_items), destination.with_items(destination_items)],
        outcome,
    )


def move_card_to_top(board: Board, item_id: str) -> Board:
    column = find_home_column(board, item_id)
    return reorder_card(board, column.column_id, column.index_of(item_id), 0, BEFORE)


def move_card_up(board: Board, item_id: str) -> Board:
    column = find_home_column(board, item_id)
    index = column.index_of(item_id)
    if index == 0:
        return board
    return reorder_card(board, column.column_id, index, index - 1, BEFORE)


def move_card_down(board: Board, item_id: str) -> Board:
    column = find_home_column(board, item_id)
    index = column.index_of(item_id)
    if index == len(column.items) - 1:
        return board
    return reorder_card(board, column.column_id, index, index + 1, AFTER)


def move_card_to_bottom(board: Board, item_id: str) -> Board:
    column = find_home_column(board, item_id)
    last = len(column.items) - 1
    return reorder_card(board, column.column_id, column.index_of(item_id), last, AFTER)


def move_card_to_column(board: Board, item_id: str, column_id: str) -> Board:
    """Move a card to the front of another column."""
    home = find_home_column(board, item_id)
    return move_card(board, home.column_id, column_id, home.index_of(item_id))
