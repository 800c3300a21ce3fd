"""Immutable board snapshots: items, columns and their order."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from dragboard.errors import InvariantError, invariant

if TYPE_CHECKING:
    from dragboard.model.outcome import Outcome


@dataclass(frozen=True)
class Item:
    """A card on the board. Only item_id takes part in board logic."""

    item_id: str
    title: str = ""
    meta: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class Column:
    """A titled, ordered list of items."""

    column_id: str
    title: str = ""
    items: tuple[Item, ...] = ()

    def item_ids(self) -> list[str]:
        return [item.item_id for item in self.items]

    def index_of(self, item_id: str) -> int:
        """Index of item_id in this column, or -1 if absent."""
        for i, item in enumerate(self.items):
            if item.item_id == item_id:
                return i
        return -1

    def __contains__(self, item_id: str) -> bool:
        return self.index_of(item_id) != -1

    def with_items(self, items: Iterable[Item]) -> Column:
        return replace(self, items=tuple(items))


@dataclass(frozen=True)
class Board:
    """One committed state of the board.

    Never mutated: every operation returns a new Board. last_operation
    records what produced this snapshot, for one-shot visual feedback.
    """

    columns: Mapping[str, Column]
    ordered_column_ids: tuple[str, ...]
    last_operation: Outcome | None = None


def build_board(columns: Iterable[Column]) -> Board:
    """Build a validated Board from columns in display order."""
    columns = list(columns)
    board = Board(
        columns={col.column_id: col for col in columns},
        ordered_column_ids=tuple(col.column_id for col in columns),
    )
    invariant(
        len(board.columns) == len(columns),
        "Duplicate column id in " + ", ".join(col.column_id for col in columns),
    )
    validate_board(board)
    return board


def validate_board(board: Board) -> None:
    """Check that column ids line up and every item id is unique.

    Raises InvariantError describing the first problem found.
    """
    ordered = board.ordered_column_ids
    invariant(len(set(ordered)) == len(ordered), f"Duplicate column ids in order {list(ordered)}")
    invariant(
        set(ordered) == set(board.columns),
        f"Column order {list(ordered)} does not match columns {sorted(board.columns)}",
    )
    seen: dict[str, str] = {}
    for column_id in ordered:
        column = board.columns[column_id]
        invariant(column.column_id == column_id, f"Column stored as {column_id!r} has id {column.column_id!r}")
        for item in column.items:
            invariant(
                item.item_id not in seen,
                f"Item {item.item_id!r} appears in both {seen.get(item.item_id)!r} and {column_id!r}",
            )
            seen[item.item_id] = column_id


def get_columns(board: Board) -> list[Column]:
    """Return the columns in display order."""
    return [board.columns[column_id] for column_id in board.ordered_column_ids]


def get_column(board: Board, column_id: str) -> Column:
    """Look up a column by id. Raises InvariantError if missing."""
    column = board.columns.get(column_id)
    invariant(column is not None, f"Column {column_id!r} not found")
    return column


def column_index(board: Board, column_id: str) -> int:
    """Position of column_id in display order."""
    invariant(column_id in board.columns, f"Column {column_id!r} not found")
    return board.ordered_column_ids.index(column_id)


def find_home_column(board: Board, item_id: str) -> Column:
    """Return the column currently holding item_id."""
    for column in get_columns(board):
        if item_id in column:
            return column
    raise InvariantError(f"Could not find column for item {item_id!r}")


def find_item(board: Board, item_id: str) -> Item:
    column = find_home_column(board, item_id)
    return column.items[column.index_of(item_id)]


def item_position(board: Board, item_id: str) -> tuple[int, int]:
    """Return (column position, index in column) for item_id."""
    for col_pos, column in enumerate(get_columns(board)):
        index = column.index_of(item_id)
        if index != -1:
            return col_pos, index
    raise InvariantError(f"Could not find column for item {item_id!r}")


def has_item(board: Board, item_id: str) -> bool:
    return any(item_id in column for column in board.columns.values())


def all_item_ids(board: Board) -> list[str]:
    """Every item id on the board, column by column."""
    return [item.item_id for column in get_columns(board) for item in column.items]


def with_columns(board: Board, updated: Iterable[Column], outcome: Outcome) -> Board:
    """Return a new Board with the given columns replaced and outcome recorded."""
    columns = dict(board.columns)
    for column in updated:
        invariant(column.column_id in columns, f"Column {column.column_id!r} not found")
        columns[column.column_id] = column
    return replace(board, columns=columns, last_operation=outcome)
