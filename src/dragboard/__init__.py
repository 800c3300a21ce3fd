"""State engine for a multi-column, multi-select drag-and-drop board."""

from dragboard.engine import BoardEngine
from dragboard.errors import InvariantError
from dragboard.gesture import CardSource, CardTarget, ColumnSource, ColumnTarget, DropEvent, Session

__all__ = [
    "BoardEngine",
    "CardSource",
    "CardTarget",
    "ColumnSource",
    "ColumnTarget",
    "DropEvent",
    "InvariantError",
    "Session",
]
