"""Event helpers: typed dispatchers, a type-keyed emitter and event errors."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Iterable, TypeVar

E = TypeVar("E")

Handler = Callable[[Any], Any]


def event_type(event: Any) -> str:
    """Return the fully qualified type name of ``event``."""
    cls = type(event)
    return f"{cls.__module__}.{cls.__qualname__}"


class EventError(Exception):
    """Base class for errors raised by the event system."""


class _MessageEventError(EventError):
    _prefix = ""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self._prefix}{message}")


class HitTestingFailedError(_MessageEventError):
    """Hit testing could not determine event targets."""

    _prefix = "Hit testing failed: "


class DelegationFailedError(_MessageEventError):
    """An event could not be delegated through the tree."""

    _prefix = "Event delegation failed: "


class ComponentNotFoundError(EventError):
    """An event referred to a component that does not exist."""

    def __init__(self, component_id: Any) -> None:
        self.component_id = component_id
        super().__init__(f"Component not found: {component_id!r}")


class InvalidEventDataError(_MessageEventError):
    """An event carried data that could not be used."""

    _prefix = "Invalid event data: "


class DispatchError(EventError):
    """One or more handlers failed while an event was dispatched."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


def _as_callable(handler: Any) -> Handler:
    handle = getattr(handler, "handle", None)
    if callable(handle):
        return handle
    if callable(handler):
        return handler
    raise TypeError(f"{handler!r} is neither callable nor has a handle method")


class Dispatcher(Generic[E]):
    """Thread-safe dispatcher that sends each event to every handler."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []
        self._lock = threading.Lock()

    def add_handler(self, handler: Any) -> None:
        """Register a callable or an object with a ``handle(event)`` method."""
        function = _as_callable(handler)
        with self._lock:
            self._handlers.append(function)

    def on(self, func: Callable[[E], Any]) -> Callable[[E], Any]:
        """Register ``func``; usable as a decorator."""
        self.add_handler(func)
        return func

    def dispatch(self, event: E) -> None:
        """Call every handler; raise DispatchError listing all failures."""
        with self._lock:
            handlers = list(self._handlers)
        errors: list[str] = []
        for handler in handlers:
            try:
                handler(event)
            except Exception as err:  # every handler runs; failures are collected
                errors.append(str(err))
        if errors:
            raise DispatchError(errors)

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)


class EventEmitter:
    """Calls handlers registered for the exact type of an emitted event."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler]] = {}
        self._lock = threading.Lock()

    def on(self, event_cls: type, handler: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Register ``handler`` for events whose type is exactly ``event_cls``."""
        with self._lock:
            self._handlers.setdefault(event_cls, []).append(handler)
        return handler

    def emit(self, event: Any) -> None:
        with self._lock:
            handlers = list(self._handlers.get(type(event), ()))
        for handler in handlers:
            handler(event)

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    def __repr__(self) -> str:
        return "EventEmitter(handlers=[EventHandlers])"