"""Tests for card and column action menus."""

import pytest

from dragboard.actions import (
    Action,
    apply_card_action,
    apply_column_action,
    card_actions,
    column_actions,
)
from dragboard.errors import InvariantError
from dragboard.model.board import Column, Item, build_board

from tests.model.conftest import _ids


@pytest.fixture
def board():
    return build_board(
        [
            Column("todo", "To do", (Item("p1"), Item("p2"), Item("p3"))),
            Column("doing", "Doing", (Item("p4"),)),
            Column("done", "", ()),
        ]
    )


def _disabled(actions):
    return {a.action_id for a in actions if a.disabled}


def test_card_actions_first_card(board):
    actions = card_actions(board, "p1")
    assert [a.label for a in actions[:4]] == ["Move to top", "Move up", "Move down", "Move to bottom"]
    assert _disabled(actions) == {"move_to_top", "move_up"}


def test_card_actions_last_card(board):
    assert _disabled(card_actions(board, "p3")) == {"move_down", "move_to_bottom"}


def test_card_actions_only_card(board):
    assert _disabled(card_actions(board, "p4")) == {"move_to_top", "move_up", "move_down", "move_to_bottom"}


def test_card_actions_list_other_columns(board):
    actions = card_actions(board, "p2")
    assert actions[4:] == [
        Action("Doing", "move_to:doing"),
        Action("done", "move_to:done"),
    ]


def test_apply_card_actions(board):
    assert _ids(apply_card_action(board, "p3", "move_to_top"), "todo") == ["p3", "p1", "p2"]
    assert _ids(apply_card_action(board, "p2", "move_up"), "todo") == ["p2", "p1", "p3"]
    assert _ids(apply_card_action(board, "p2", "move_down"), "todo") == ["p1", "p3", "p2"]
    assert _ids(apply_card_action(board, "p1", "move_to_bottom"), "todo") == ["p2", "p3", "p1"]


def test_apply_move_to_column(board):
    new = apply_card_action(board, "p2", "move_to:doing")
    assert _ids(new, "doing") == ["p2", "p4"]
    assert _ids(new, "todo") == ["p1", "p3"]


def test_apply_unknown_card_action(board):
    with pytest.raises(InvariantError):
        apply_card_action(board, "p1", "explode")
    with pytest.raises(InvariantError):
        apply_card_action(board, "p1", "move_to:nowhere")


def test_column_actions(board):
    assert _disabled(column_actions(board, "todo")) == {"move_left"}
    assert _disabled(column_actions(board, "doing")) == set()
    assert _disabled(column_actions(board, "done")) == {"move_right"}


def test_apply_column_actions(board):
    assert apply_column_action(board, "doing", "move_left").ordered_column_ids == ("doing", "todo", "done")
    assert apply_column_action(board, "doing", "move_right").ordered_column_ids == ("todo", "done", "doing")
    assert apply_column_action(board, "todo", "move_left") is board
    with pytest.raises(InvariantError):
        apply_column_action(board, "todo", "spin")
