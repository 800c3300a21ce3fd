"""Finder-style multi-selection over board items.

A selection is a tuple of item ids in the order they were added. The
last element is the one a range selection extends from.
"""

from __future__ import annotations

import sys
from typing import Literal

from dragboard.errors import InvariantError, invariant
from dragboard.model.board import Board, find_home_column, has_item

Selection = tuple[str, ...]
SelectionMode = Literal["single", "group", "range"]

SINGLE: SelectionMode = "single"
GROUP: SelectionMode = "group"
RANGE: SelectionMode = "range"


def _check_item(board: Board, item_id: str) -> None:
    invariant(has_item(board, item_id), f"Item {item_id!r} not found")


def toggle_selection(board: Board, selection: Selection, item_id: str) -> Selection:
    """Plain click: select only item_id, or clear if it was the only one."""
    _check_item(board, item_id)
    if item_id not in selection:
        return (item_id,)
    if len(selection) > 1:
        return (item_id,)
    return ()


def toggle_selection_in_group(board: Board, selection: Selection, item_id: str) -> Selection:
    """Modifier click: add item_id to the selection, or remove it."""
    _check_item(board, item_id)
    if item_id not in selection:
        return (*selection, item_id)
    return tuple(i for i in selection if i != item_id)


def multi_select_to(board: Board, selection: Selection, item_id: str) -> Selection:
    """Shift click: extend the selection up to item_id.

    With nothing selected, or when the last selected item lives in a
    different column, everything in item_id's column from the top
    through item_id becomes the selection. Within the same column the
    range between the last selected item and item_id is appended in
    the direction of travel, skipping ids already selected.
    """
    column_of_new = find_home_column(board, item_id)
    index_of_new = column_of_new.index_of(item_id)
    up_to_new = tuple(column_of_new.item_ids()[: index_of_new + 1])

    if not selection:
        return up_to_new

    last = selection[-1]
    column_of_last = find_home_column(board, last)
    if column_of_last.column_id != column_of_new.column_id:
        return up_to_new

    index_of_last = column_of_last.index_of(last)
    if index_of_new == index_of_last:
        return selection

    forwards = index_of_new > index_of_last
    start, end = (index_of_last, index_of_new) if forwards else (index_of_new, index_of_last)
    in_between = column_of_new.item_ids()[start : end + 1]
    to_add = [i for i in in_between if i not in selection]
    if not forwards:
        to_add.reverse()
    return (*selection, *to_add)


def prune_selection(board: Board, selection: Selection) -> Selection:
    """Drop ids that are no longer on the board."""
    return tuple(i for i in selection if has_item(board, i))


def selection_mode_for(
    shift: bool = False,
    ctrl: bool = False,
    meta: bool = False,
    platform: str | None = None,
) -> SelectionMode:
    """Map click modifiers to a selection mode.

    The group toggle key is Ctrl on Windows and Meta (Cmd) elsewhere; it
    wins over Shift.
    """
    if platform is None:
        platform = sys.platform
    toggle_key = ctrl if platform.startswith("win") else meta
    if toggle_key:
        return GROUP
    if shift:
        return RANGE
    return SINGLE


def apply_selection(board: Board, selection: Selection, item_id: str, mode: SelectionMode) -> Selection:
    match mode:
        case "single":
            return toggle_selection(board, selection, item_id)
        case "group":
            return toggle_selection_in_group(board, selection, item_id)
        case "range":
            return multi_select_to(board, selection, item_id)
    raise InvariantError(f"Unknown selection mode {mode!r}")
