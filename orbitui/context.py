"""Context values shared down a component tree, and callback props."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


class ContextProvider:
    """Stores one value per type, falling back to a parent provider on lookup."""

    def __init__(self) -> None:
        self._parent: ContextProvider | None = None
        self._values: dict[type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def with_parent(cls, parent: "ContextProvider") -> "ContextProvider":
        provider = cls()
        provider._parent = parent
        return provider

    def provide(self, value: Any) -> None:
        """Store ``value`` under its own type, replacing any earlier one."""
        with self._lock:
            self._values[type(value)] = value

    def consume(self, value_type: type[T]) -> T | None:
        """Return the value of ``value_type`` from here or an ancestor, or None."""
        with self._lock:
            if value_type in self._values:
                return self._values[value_type]
        if self._parent is not None:
            return self._parent.consume(value_type)
        return None

    def has(self, value_type: type) -> bool:
        with self._lock:
            if value_type in self._values:
                return True
        return self._parent is not None and self._parent.has(value_type)

    def remove(self, value_type: type) -> bool:
        """Remove the local value of ``value_type``; the parent is left alone."""
        with self._lock:
            return self._values.pop(value_type, _ABSENT) is not _ABSENT

    def __repr__(self) -> str:
        with self._lock:
            count = len(self._values)
        return f"ContextProvider(parent={self._parent is not None}, values=[{count} values])"


_ABSENT = object()


@dataclass(frozen=True)
class Callback(Generic[A, R]):
    """A function that can be passed to a component as a prop."""

    func: Callable[[A], R]

    def call(self, args: A) -> R:
        return self.func(args)

    def __call__(self, args: A) -> R:
        return self.func(args)


def callback(func: Callable[[A], R]) -> Callback[A, R]:
    """Wrap ``func`` in a Callback."""
    return Callback(func)