"""Pure board state: snapshots, reordering, selection and multi-drag."""

from dragboard.model.board import (
    Board,
    Column,
    Item,
    build_board,
    find_home_column,
    get_column,
    get_columns,
    validate_board,
)
from dragboard.model.card import move_card, reorder_card
from dragboard.model.cell import Cell
from dragboard.model.column import reorder_column
from dragboard.model.multidrag import multi_drag_reorder, multi_drop_index, sort_selected_ids
from dragboard.model.outcome import CardMove, CardReorder, ColumnReorder, MultiCardDrag, Outcome, highlight_targets
from dragboard.model.reorder import AFTER, BEFORE, reorder_with_edge
from dragboard.model.selection import multi_select_to, toggle_selection, toggle_selection_in_group

__all__ = [
    "AFTER",
    "BEFORE",
    "Board",
    "CardMove",
    "CardReorder",
    "Cell",
    "Column",
    "ColumnReorder",
    "Item",
    "MultiCardDrag",
    "Outcome",
    "build_board",
    "find_home_column",
    "get_column",
    "get_columns",
    "highlight_targets",
    "move_card",
    "multi_drag_reorder",
    "multi_drop_index",
    "multi_select_to",
    "reorder_card",
    "reorder_column",
    "reorder_with_edge",
    "sort_selected_ids",
    "toggle_selection",
    "toggle_selection_in_group",
    "validate_board",
]
