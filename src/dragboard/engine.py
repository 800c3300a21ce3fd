"""Board engine: the committed board and selection for one board instance."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from dragboard.actions import apply_card_action, apply_column_action
from dragboard.gesture import DragSource, DropEvent, MultiDrag, Session, interpret_drop, start_drag
from dragboard.model import card as card_ops
from dragboard.model import column as column_ops
from dragboard.model.board import Board, Column, get_columns
from dragboard.model.cell import Cell
from dragboard.model.multidrag import multi_drag_reorder
from dragboard.model.outcome import Outcome, outcome_to_dict
from dragboard.model.reorder import Edge
from dragboard.model.selection import (
    Selection,
    SelectionMode,
    apply_selection,
    multi_select_to,
    prune_selection,
    toggle_selection,
    toggle_selection_in_group,
)

logger = logging.getLogger(__name__)


class BoardEngine:
    """Owns one board's state and applies operations to it atomically.

    Every operation computes a complete new Board before anything is
    committed, so a failing operation leaves state untouched. Watch
    .board_cell or .selection_cell to be told about commits.
    """

    def __init__(self, board: Board, session: Session | None = None) -> None:
        self.session = session or Session()
        self.board_cell: Cell[Board] = Cell(board)
        self.selection_cell: Cell[Selection] = Cell(())

    @property
    def board(self) -> Board:
        return self.board_cell.value

    @property
    def selection(self) -> Selection:
        return self.selection_cell.value

    @property
    def last_operation(self) -> Outcome | None:
        return self.board.last_operation

    def get_columns(self) -> list[Column]:
        return get_columns(self.board)

    def watch(self, callback: Callable[[Board], None]) -> Callable[[], None]:
        """Call callback with each newly committed board. Returns an unwatch callable."""
        return self.board_cell.watch(lambda cell, old, new: callback(new))

    def _commit(self, board: Board) -> Board:
        if board is self.board:
            return board
        logger.debug("commit %s", outcome_to_dict(board.last_operation))
        self.board_cell.value = board
        self.selection_cell.value = prune_selection(board, self.selection)
        return board

    # --- Board operations ---

    def reorder_column(self, start_index: int, finish_index: int, edge: Edge | None = None) -> Board:
        return self._commit(column_ops.reorder_column(self.board, start_index, finish_index, edge))

    def reorder_card(
        self,
        column_id: str,
        start_index: int,
        finish_index: int,
        edge: Edge | None = None,
    ) -> Board:
        return self._commit(card_ops.reorder_card(self.board, column_id, start_index, finish_index, edge))

    def move_card(
        self,
        start_column_id: str,
        finish_column_id: str,
        item_index_in_start_column: int,
        item_index_in_finish_column: int | None = None,
    ) -> Board:
        return self._commit(
            card_ops.move_card(
                self.board,
                start_column_id,
                finish_column_id,
                item_index_in_start_column,
                item_index_in_finish_column,
            )
        )

    def multi_drag_reorder(
        self,
        selected_ids: Sequence[str],
        dragged_id: str,
        destination_column_id: str,
        final_index: int,
    ) -> Board:
        """Batch-move selected_ids. Clears the selection once committed."""
        board = multi_drag_reorder(self.board, selected_ids, dragged_id, destination_column_id, final_index)
        self._commit(board)
        self.clear_selection()
        return board

    def apply_card_action(self, item_id: str, action_id: str) -> Board:
        return self._commit(apply_card_action(self.board, item_id, action_id))

    def apply_column_action(self, column_id: str, action_id: str) -> Board:
        return self._commit(apply_column_action(self.board, column_id, action_id))

    # --- Selection ---

    def toggle_selection(self, item_id: str) -> Selection:
        self.selection_cell.value = toggle_selection(self.board, self.selection, item_id)
        return self.selection

    def toggle_selection_in_group(self, item_id: str) -> Selection:
        self.selection_cell.value = toggle_selection_in_group(self.board, self.selection, item_id)
        return self.selection

    def multi_select_to(self, item_id: str) -> Selection:
        self.selection_cell.value = multi_select_to(self.board, self.selection, item_id)
        return self.selection

    def select(self, item_id: str, mode: SelectionMode = "single") -> Selection:
        self.selection_cell.value = apply_selection(self.board, self.selection, item_id, mode)
        return self.selection

    def clear_selection(self) -> None:
        self.selection_cell.value = ()

    # --- Gestures ---

    def drag_start(self, source: DragSource) -> Selection:
        """Begin a drag. Dragging a card outside the selection clears it."""
        if source.session is not self.session:
            return self.selection
        self.selection_cell.value = start_drag(self.selection, source)
        return self.selection

    def drop(self, event: DropEvent) -> Board:
        """Apply a finished drag. Cancelled or foreign drops change nothing."""
        command = interpret_drop(self.board, self.selection, event, self.session)
        if command is None:
            return self.board
        logger.debug("drop %r -> %r", event.source, command)
        board = self._commit(command.apply(self.board))
        if isinstance(command, MultiDrag):
            self.clear_selection()
        return board
