"""A single mutable slot with change notification."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Callback = Callable[["Cell", Any, Any], None]


class Cell(Generic[T]):
    """Holds the latest value of something that is otherwise replaced wholesale.

    Long-lived callbacks read .value to see the current state without
    having to be re-registered on every change. Setting a different
    value bumps the version and fires watchers with (cell, old, new).
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._watchers: list[Callback] = []
        self._version = 0

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        old = self._value
        self._value = new
        if old != new:
            self._version += 1
            for cb in list(self._watchers):
                cb(self, old, new)

    @property
    def version(self) -> int:
        return self._version

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Watch for changes. Returns an unwatch callable."""
        self._watchers.append(callback)
        return lambda: callback in self._watchers and self._watchers.remove(callback)

    def __repr__(self) -> str:
        return f"<Cell v{self._version} {self._value!r}>"
