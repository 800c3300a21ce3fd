"""Shared test helpers for model tests."""

from dragboard.model.board import Column, Item, build_board


def _make_column(column_id, item_ids=(), title=None):
    """Helper to build a column of bare items."""
    return Column(
        column_id=column_id,
        title=title if title is not None else column_id.title(),
        items=tuple(Item(item_id) for item_id in item_ids),
    )


def _make_board(**columns):
    """Helper to build a board: _make_board(a=["p1"], b=["p2"])."""
    return build_board(_make_column(column_id, item_ids) for column_id, item_ids in columns.items())


def _ids(board, column_id):
    return board.columns[column_id].item_ids()
