"""Which action menu is open: at most one per owner."""

from __future__ import annotations

from typing import Callable

Contains = Callable[[str, object], bool]


class MenuState:
    """Tracks the single open menu for one board.

    Opening a menu closes whichever one was open before. Closing is
    compare-and-set: close(menu_id) only closes menu_id, so a stale
    close from a menu that was already replaced does nothing. Watchers
    get (previous, current) whenever the open menu changes.
    """

    def __init__(self) -> None:
        self._open_id: str | None = None
        self._watchers: list[Callable[[str | None, str | None], None]] = []

    @property
    def open_id(self) -> str | None:
        return self._open_id

    def is_open(self, menu_id: str) -> bool:
        return self._open_id == menu_id

    def _set(self, menu_id: str | None) -> None:
        previous = self._open_id
        if previous == menu_id:
            return
        self._open_id = menu_id
        for cb in list(self._watchers):
            cb(previous, menu_id)

    def open(self, menu_id: str) -> str | None:
        """Open menu_id. Returns the id of the menu it replaced, if any."""
        previous = self._open_id
        self._set(menu_id)
        return previous if previous != menu_id else None

    def close(self, menu_id: str) -> bool:
        """Close menu_id if it is the open one. Returns True if it was."""
        if self._open_id != menu_id:
            return False
        self._set(None)
        return True

    def toggle(self, menu_id: str) -> bool:
        """Open menu_id, or close it if already open. Returns the new open state."""
        if self.is_open(menu_id):
            self.close(menu_id)
            return False
        self.open(menu_id)
        return True

    def close_all(self) -> None:
        self._set(None)

    def click(self, target: object, contains: Contains) -> bool:
        """Close the open menu if target lies outside it.

        contains(menu_id, target) answers whether target is inside the
        menu's rendered area. Returns True if a menu was closed.
        """
        if self._open_id is None or contains(self._open_id, target):
            return False
        self._set(None)
        return True

    def watch(self, callback: Callable[[str | None, str | None], None]) -> Callable[[], None]:
        """Watch open/close changes. Returns an unwatch callable."""
        self._watchers.append(callback)
        return lambda: callback in self._watchers and self._watchers.remove(callback)
