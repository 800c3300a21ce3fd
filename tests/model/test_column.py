"""Tests for column reordering."""

import pytest

from dragboard.errors import InvariantError
from dragboard.model.column import move_column_left, move_column_right, reorder_column
from dragboard.model.outcome import ColumnReorder
from dragboard.model.reorder import AFTER, BEFORE

from tests.model.conftest import _make_board


@pytest.fixture
def board():
    return _make_board(a=["p1"], b=["p2"], c=["p3"])


def test_reorder_column_after(board):
    new = reorder_column(board, 0, 2, AFTER)
    assert new.ordered_column_ids == ("b", "c", "a")
    assert new.last_operation == ColumnReorder(column_id="a", start_index=0, finish_index=2)


def test_reorder_column_before(board):
    new = reorder_column(board, 0, 2, BEFORE)
    assert new.ordered_column_ids == ("b", "a", "c")
    assert new.last_operation.finish_index == 1


def test_reorder_column_backward(board):
    new = reorder_column(board, 2, 0, BEFORE)
    assert new.ordered_column_ids == ("c", "a", "b")
    assert new.last_operation.column_id == "c"


def test_reorder_column_leaves_input_alone(board):
    reorder_column(board, 0, 2, AFTER)
    assert board.ordered_column_ids == ("a", "b", "c")


def test_reorder_column_onto_itself_is_noop(board):
    assert reorder_column(board, 1, 1, AFTER) is board
    assert board.last_operation is None


def test_reorder_column_to_same_slot_is_noop(board):
    # Dropping on the left edge of the right-hand neighbour changes nothing.
    assert reorder_column(board, 0, 1, BEFORE) is board


def test_reorder_column_keeps_columns(board):
    new = reorder_column(board, 0, 2, AFTER)
    assert set(new.columns) == {"a", "b", "c"}
    assert new.columns["a"] is board.columns["a"]


def test_reorder_column_out_of_range(board):
    with pytest.raises(InvariantError):
        reorder_column(board, 0, 3)
    with pytest.raises(InvariantError):
        reorder_column(board, -1, 0)


def test_move_column_left(board):
    new = move_column_left(board, "b")
    assert new.ordered_column_ids == ("b", "a", "c")
    assert new.last_operation == ColumnReorder(column_id="b", start_index=1, finish_index=0)


def test_move_column_left_first_is_noop(board):
    assert move_column_left(board, "a") is board


def test_move_column_right(board):
    new = move_column_right(board, "a")
    assert new.ordered_column_ids == ("b", "a", "c")
    assert new.last_operation == ColumnReorder(column_id="a", start_index=0, finish_index=1)


def test_move_column_right_last_is_noop(board):
    assert move_column_right(board, "c") is board


def test_move_column_unknown(board):
    with pytest.raises(InvariantError):
        move_column_left(board, "zzz")
