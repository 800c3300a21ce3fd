"""Records of the most recent board mutation, for post-move feedback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal

if TYPE_CHECKING:
    from dragboard.model.board import Board


@dataclass(frozen=True)
class ColumnReorder:
    type: ClassVar[str] = "column-reorder"

    column_id: str
    start_index: int
    finish_index: int


@dataclass(frozen=True)
class CardReorder:
    type: ClassVar[str] = "card-reorder"

    column_id: str
    start_index: int
    finish_index: int


@dataclass(frozen=True)
class CardMove:
    type: ClassVar[str] = "card-move"

    finish_column_id: str
    item_index_in_start_column: int
    item_index_in_finish_column: int


@dataclass(frozen=True)
class MultiCardDrag:
    type: ClassVar[str] = "multi-card-drag"

    selected_ids: tuple[str, ...]
    dragged_id: str
    destination_column_id: str
    final_index: int


Outcome = ColumnReorder | CardReorder | CardMove | MultiCardDrag


HighlightKind = Literal["column", "card"]


@dataclass(frozen=True)
class Highlight:
    """Something the presentation layer should flash after a move."""

    kind: HighlightKind
    target_id: str
    restore_focus: bool = False


def outcome_to_dict(outcome: Outcome | None) -> dict | None:
    """Serialize an outcome with camelCase keys and a type tag."""
    match outcome:
        case None:
            return None
        case ColumnReorder() | CardReorder():
            return {
                "type": outcome.type,
                "columnId": outcome.column_id,
                "startIndex": outcome.start_index,
                "finishIndex": outcome.finish_index,
            }
        case CardMove():
            return {
                "type": outcome.type,
                "finishColumnId": outcome.finish_column_id,
                "itemIndexInStartColumn": outcome.item_index_in_start_column,
                "itemIndexInFinishColumn": outcome.item_index_in_finish_column,
            }
        case MultiCardDrag():
            return {
                "type": outcome.type,
                "selectedIds": list(outcome.selected_ids),
                "draggedId": outcome.dragged_id,
                "destinationColumnId": outcome.destination_column_id,
                "finalIndex": outcome.final_index,
            }
    raise TypeError(f"Not an outcome: {outcome!r}")


def highlight_targets(board: Board, outcome: Outcome | None = None) -> list[Highlight]:
    """Resolve an outcome against board into the elements to flash.

    Defaults to board.last_operation. Cards that moved column remount,
    so a single cross-column move also asks for focus to be restored.
    """
    if outcome is None:
        outcome = board.last_operation
    match outcome:
        case None:
            return []
        case ColumnReorder():
            column_id = board.ordered_column_ids[outcome.finish_index]
            return [Highlight("column", column_id)]
        case CardReorder():
            column = board.columns[outcome.column_id]
            return [Highlight("card", column.items[outcome.finish_index].item_id)]
        case CardMove():
            column = board.columns[outcome.finish_column_id]
            item = column.items[outcome.item_index_in_finish_column]
            return [Highlight("card", item.item_id, restore_focus=True)]
        case MultiCardDrag():
            items = board.columns[outcome.destination_column_id].items
            highlights = []
            for offset, item_id in enumerate(outcome.selected_ids):
                index = outcome.final_index + offset
                if index < len(items) and items[index].item_id == item_id:
                    highlights.append(Highlight("card", item_id))
            return highlights
    raise TypeError(f"Not an outcome: {outcome!r}")
