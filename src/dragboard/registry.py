"""Lookup of presentation handles by item and column id.

The engine only emits ids (in outcomes). Whatever renders the board
registers a handle per rendered item and column here, then resolves
outcome ids back to handles to flash or focus them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from dragboard.errors import InvariantError, invariant
from dragboard.model.outcome import HighlightKind

logger = logging.getLogger(__name__)


class Registry:
    """Two id -> handle maps whose registrations hand back disposers."""

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}
        self._columns: dict[str, Any] = {}

    @staticmethod
    def _register(table: dict[str, Any], key: str, entry: Any) -> Callable[[], None]:
        if key in table:
            logger.warning("replacing registered entry for %r", key)
        table[key] = entry

        def dispose() -> None:
            # A newer registration for the same id stays put.
            if table.get(key) is entry:
                del table[key]

        return dispose

    def register_item(self, item_id: str, entry: Any) -> Callable[[], None]:
        """Register a handle for item_id. Returns a disposer."""
        return self._register(self._items, item_id, entry)

    def register_column(self, column_id: str, entry: Any) -> Callable[[], None]:
        """Register a handle for column_id. Returns a disposer."""
        return self._register(self._columns, column_id, entry)

    def lookup_item(self, item_id: str) -> Any:
        entry = self._items.get(item_id)
        invariant(entry is not None, f"No registered item {item_id!r}")
        return entry

    def lookup_column(self, column_id: str) -> Any:
        entry = self._columns.get(column_id)
        invariant(entry is not None, f"No registered column {column_id!r}")
        return entry

    def lookup(self, kind: HighlightKind, target_id: str) -> Any:
        """Look up by highlight kind ("card" or "column")."""
        match kind:
            case "column":
                return self.lookup_column(target_id)
            case "card":
                return self.lookup_item(target_id)
        raise InvariantError(f"Unknown highlight kind {kind!r}")
