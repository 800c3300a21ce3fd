"""Keyboard- and menu-driven moves for cards and columns."""

from __future__ import annotations

from dataclasses import dataclass

from dragboard.errors import InvariantError
from dragboard.model.board import Board, column_index, find_home_column, get_column, get_columns
from dragboard.model.card import (
    move_card_down,
    move_card_to_bottom,
    move_card_to_column,
    move_card_to_top,
    move_card_up,
)
from dragboard.model.column import move_column_left, move_column_right

MOVE_TO_PREFIX = "move_to:"


@dataclass(frozen=True)
class Action:
    """An entry in a card or column action menu."""

    label: str
    action_id: str
    disabled: bool = False


def card_actions(board: Board, item_id: str) -> list[Action]:
    """Menu entries for a card, disabled where the move would do nothing."""
    column = find_home_column(board, item_id)
    index = column.index_of(item_id)
    is_first = index == 0
    is_last = index == len(column.items) - 1
    actions = [
        Action("Move to top", "move_to_top", disabled=is_first),
        Action("Move up", "move_up", disabled=is_first),
        Action("Move down", "move_down", disabled=is_last),
        Action("Move to bottom", "move_to_bottom", disabled=is_last),
    ]
    for other in get_columns(board):
        if other.column_id != column.column_id:
            actions.append(Action(other.title or other.column_id, MOVE_TO_PREFIX + other.column_id))
    return actions


def apply_card_action(board: Board, item_id: str, action_id: str) -> Board:
    match action_id:
        case "move_to_top":
            return move_card_to_top(board, item_id)
        case "move_up":
            return move_card_up(board, item_id)
        case "move_down":
            return move_card_down(board, item_id)
        case "move_to_bottom":
            return move_card_to_bottom(board, item_id)
    if action_id.startswith(MOVE_TO_PREFIX):
        column_id = action_id[len(MOVE_TO_PREFIX) :]
        get_column(board, column_id)
        return move_card_to_column(board, item_id, column_id)
    raise InvariantError(f"Unknown card action {action_id!r}")


def column_actions(board: Board, column_id: str) -> list[Action]:
    index = column_index(board, column_id)
    return [
        Action("Move left", "move_left", disabled=index == 0),
        Action("Move right", "move_right", disabled=index == len(board.ordered_column_ids) - 1),
    ]


def apply_column_action(board: Board, column_id: str, action_id: str) -> Board:
    match action_id:
        case "move_left":
            return move_column_left(board, column_id)
        case "move_right":
            return move_column_right(board, column_id)
    raise InvariantError(f"Unknown column action {action_id!r}")
