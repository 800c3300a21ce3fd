"""Turn a finished drag gesture into one board operation.

A drop event carries the drag source and the drop targets under the
pointer, innermost first. Cards dropped on a column body land at its
end; cards dropped on another card land relative to that card's edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import uuid4

from dragboard.errors import InvariantError, invariant
from dragboard.model.board import Board, column_index, find_home_column, get_column
from dragboard.model.card import move_card, reorder_card
from dragboard.model.column import reorder_column
from dragboard.model.multidrag import multi_drag_reorder, multi_drop_index
from dragboard.model.reorder import AFTER, Edge
from dragboard.model.selection import Selection

logger = logging.getLogger(__name__)


class Session:
    """Identifies one board instance; drags only land on their own board.

    Two sessions are equal only if they are the same object.
    """

    __slots__ = ("name",)

    def __init__(self, name: str | None = None) -> None:
        self.name = name or uuid4().hex[:12]

    def __repr__(self) -> str:
        return f"<Session {self.name}>"


# --- Drag sources and drop targets ---


@dataclass(frozen=True)
class ColumnSource:
    column_id: str
    session: Session


@dataclass(frozen=True)
class CardSource:
    item_id: str
    session: Session


DragSource = ColumnSource | CardSource


@dataclass(frozen=True)
class ColumnTarget:
    """A column: its header when reordering columns, its body for cards."""

    column_id: str
    session: Session
    edge: Edge | None = None


@dataclass(frozen=True)
class CardTarget:
    item_id: str
    session: Session
    edge: Edge | None = None


DropTarget = ColumnTarget | CardTarget


@dataclass(frozen=True)
class DropEvent:
    source: DragSource
    targets: tuple[DropTarget, ...] = ()


# --- Commands ---


@dataclass(frozen=True)
class ReorderColumn:
    start_index: int
    finish_index: int
    edge: Edge | None = None

    def apply(self, board: Board) -> Board:
        return reorder_column(board, self.start_index, self.finish_index, self.edge)


@dataclass(frozen=True)
class ReorderCard:
    column_id: str
    start_index: int
    finish_index: int
    edge: Edge | None = None

    def apply(self, board: Board) -> Board:
        return reorder_card(board, self.column_id, self.start_index, self.finish_index, self.edge)


@dataclass(frozen=True)
class MoveCard:
    start_column_id: str
    finish_column_id: str
    item_index_in_start_column: int
    item_index_in_finish_column: int | None = None

    def apply(self, board: Board) -> Board:
        return move_card(
            board,
            self.start_column_id,
            self.finish_column_id,
            self.item_index_in_start_column,
            self.item_index_in_finish_column,
        )


@dataclass(frozen=True)
class MultiDrag:
    selected_ids: tuple[str, ...]
    dragged_id: str
    destination_column_id: str
    final_index: int

    def apply(self, board: Board) -> Board:
        return multi_drag_reorder(
            board,
            self.selected_ids,
            self.dragged_id,
            self.destination_column_id,
            self.final_index,
        )


Command = ReorderColumn | ReorderCard | MoveCard | MultiDrag


# --- Interpretation ---


def can_monitor(session: Session, source: DragSource) -> bool:
    """True if the drag started on the board owning session."""
    return source.session is session


def can_drop(session: Session, source: DragSource, target: DropTarget) -> bool:
    """True if target on this board accepts source.

    Columns only accept columns; cards are accepted by cards and by
    column bodies.
    """
    if target.session is not session or source.session is not session:
        return False
    if isinstance(source, ColumnSource):
        return isinstance(target, ColumnTarget)
    return True


def start_drag(selection: Selection, source: DragSource) -> Selection:
    """Selection to use for a drag. Dragging an unselected card drags only it."""
    if isinstance(source, CardSource) and source.item_id not in selection:
        return ()
    return selection


def interpret_drop(
    board: Board,
    selection: Selection,
    event: DropEvent,
    session: Session,
) -> Command | None:
    """Classify a drop into the command to apply, or None if nothing happens.

    Drops from another board, drops on nothing and drops that leave the
    board as it is all return None.
    """
    if not can_monitor(session, event.source):
        logger.debug("ignoring drop from foreign session %r", event.source.session)
        return None

    targets = [t for t in event.targets if can_drop(session, event.source, t)]
    if not targets:
        logger.debug("drop of %r cancelled: no targets", event.source)
        return None

    match event.source:
        case ColumnSource():
            return _column_drop(board, event.source, targets)
        case CardSource():
            return _card_drop(board, selection, event.source, targets)
    raise InvariantError(f"Unknown drag source {event.source!r}")


def _column_drop(board: Board, source: ColumnSource, targets: list[DropTarget]) -> Command:
    invariant(len(targets) == 1, f"Column drop expects one target, got {len(targets)}")
    (target,) = targets
    return ReorderColumn(
        start_index=column_index(board, source.column_id),
        finish_index=column_index(board, target.column_id),
        edge=target.edge,
    )


def _card_drop(
    board: Board,
    selection: Selection,
    source: CardSource,
    targets: list[DropTarget],
) -> Command | None:
    home = find_home_column(board, source.item_id)
    item_index = home.index_of(source.item_id)
    is_multi = len(selection) > 1 and source.item_id in selection

    if len(targets) == 1:
        (target,) = targets
        invariant(isinstance(target, ColumnTarget), f"Card drop on a lone card target {target!r}")
        destination = get_column(board, target.column_id)
        if is_multi:
            return _multi(board, selection, source, destination.column_id, len(destination.items))
        if destination.column_id == home.column_id:
            last = len(home.items) - 1
            if item_index == last:
                return None
            return ReorderCard(home.column_id, item_index, last)
        return MoveCard(home.column_id, destination.column_id, item_index, len(destination.items))

    invariant(len(targets) == 2, f"Card drop expects one or two targets, got {len(targets)}")
    card_target, column_target = targets
    invariant(
        isinstance(card_target, CardTarget) and isinstance(column_target, ColumnTarget),
        f"Card drop expects a card inside a column, got {targets!r}",
    )
    destination = get_column(board, column_target.column_id)
    index_of_target = destination.index_of(card_target.item_id)
    invariant(
        index_of_target != -1,
        f"Item {card_target.item_id!r} is not in column {destination.column_id!r}",
    )
    insert_at = index_of_target + 1 if card_target.edge == AFTER else index_of_target

    if is_multi:
        return _multi(board, selection, source, destination.column_id, insert_at)
    if destination.column_id == home.column_id:
        return ReorderCard(home.column_id, item_index, index_of_target, card_target.edge)
    return MoveCard(home.column_id, destination.column_id, item_index, insert_at)


def _multi(
    board: Board,
    selection: Selection,
    source: CardSource,
    destination_column_id: str,
    insert_at: int,
) -> MultiDrag:
    return MultiDrag(
        selected_ids=tuple(selection),
        dragged_id=source.item_id,
        destination_column_id=destination_column_id,
        final_index=multi_drop_index(board, selection, destination_column_id, insert_at),
    )
