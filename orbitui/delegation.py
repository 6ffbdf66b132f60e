"""Event delegation through a tree: capturing, target and bubbling phases."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterator, TypeVar

E = TypeVar("E")

DelegateHandler = Callable[[Any, "EventPropagation"], Any]


class PropagationPhase(Enum):
    """Phase an event is in while travelling through the tree."""

    CAPTURING = "Capturing"
    TARGET = "Target"
    BUBBLING = "Bubbling"


@dataclass
class EventPropagation:
    """Controls and records how an event propagates through the tree."""

    phase: PropagationPhase
    stopped: bool = False
    default_prevented: bool = False
    target_id: int | None = None
    current_target_id: int | None = None

    def stop_propagation(self) -> None:
        self.stopped = True

    def prevent_default(self) -> None:
        self.default_prevented = True

    def is_propagation_stopped(self) -> bool:
        return self.stopped

    def is_default_prevented(self) -> bool:
        return self.default_prevented


class DelegatedEvent(Generic[E]):
    """An event paired with its propagation state."""

    def __init__(self, event: E, phase: PropagationPhase) -> None:
        self.event = event
        self.propagation = EventPropagation(phase)

    def stop_propagation(self) -> None:
        self.propagation.stop_propagation()

    def prevent_default(self) -> None:
        self.propagation.prevent_default()

    def __repr__(self) -> str:
        return f"DelegatedEvent(event={self.event!r}, propagation={self.propagation!r})"


class _HandlerTable:
    """Handlers keyed by the exact event type they accept."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[DelegateHandler]] = {}
        self._lock = threading.Lock()

    def add(self, event_cls: type, handler: DelegateHandler) -> None:
        with self._lock:
            self._handlers.setdefault(event_cls, []).append(handler)

    def run(self, event: Any, propagation: EventPropagation) -> None:
        with self._lock:
            handlers = list(self._handlers.get(type(event), ()))
        for handler in handlers:
            handler(event, propagation)
            if propagation.is_propagation_stopped():
                break


class EventDelegate:
    """Holds handlers for one node and links to its parent and children."""

    def __init__(self, component_id: int | None = None) -> None:
        self.component_id = component_id
        self._capturing = _HandlerTable()
        self._bubbling = _HandlerTable()
        self._target = _HandlerTable()
        self._parent: EventDelegate | None = None
        self._children: list[EventDelegate] = []

    @property
    def parent(self) -> "EventDelegate | None":
        return self._parent

    @property
    def children(self) -> tuple["EventDelegate", ...]:
        return tuple(self._children)

    def set_parent(self, parent: "EventDelegate") -> None:
        """Set the delegate events bubble up to."""
        self._parent = parent

    def add_child(self, child: "EventDelegate") -> None:
        """Add a delegate events are captured down to."""
        self._children.append(child)

    def capture(self, event_cls: type, handler: DelegateHandler) -> DelegateHandler:
        """Register ``handler`` for ``event_cls`` in the capturing phase."""
        self._capturing.add(event_cls, handler)
        return handler

    def bubble(self, event_cls: type, handler: DelegateHandler) -> DelegateHandler:
        """Register ``handler`` for ``event_cls`` in the bubbling phase."""
        self._bubbling.add(event_cls, handler)
        return handler

    def on(self, event_cls: type, handler: DelegateHandler) -> DelegateHandler:
        """Register ``handler`` for ``event_cls`` when this node is the target."""
        self._target.add(event_cls, handler)
        return handler

    def dispatch(self, event: Any, target_id: int | None) -> EventPropagation:
        """Capture down from here, handle at the target, then bubble up to the root."""
        propagation = EventPropagation(
            PropagationPhase.CAPTURING,
            target_id=target_id,
            current_target_id=self.component_id,
        )
        self._dispatch_capturing(event, propagation, target_id)

        if not propagation.is_propagation_stopped() and self.component_id == target_id:
            propagation.phase = PropagationPhase.TARGET
            propagation.current_target_id = self.component_id
            self._target.run(event, propagation)

        if not propagation.is_propagation_stopped():
            propagation.phase = PropagationPhase.BUBBLING
            self._dispatch_bubbling(event, propagation)
        return propagation

    def _dispatch_capturing(
        self, event: Any, propagation: EventPropagation, target_id: int | None
    ) -> None:
        if not propagation.is_propagation_stopped():
            propagation.current_target_id = self.component_id
            self._capturing.run(event, propagation)
        if self.component_id == target_id:
            return
        for child in list(self._children):
            if not propagation.is_propagation_stopped():
                child._dispatch_capturing(event, propagation, target_id)

    def _dispatch_bubbling(self, event: Any, propagation: EventPropagation) -> None:
        for delegate in self._ancestry():
            if propagation.is_propagation_stopped():
                return
            propagation.current_target_id = delegate.component_id
            delegate._bubbling.run(event, propagation)

    def _ancestry(self) -> Iterator["EventDelegate"]:
        delegate: EventDelegate | None = self
        while delegate is not None:
            yield delegate
            delegate = delegate._parent

    def __repr__(self) -> str:
        parent = "<delegate>" if self._parent is not None else None
        return (
            f"EventDelegate(component_id={self.component_id!r}, parent={parent!r}, "
            f"children=<{len(self._children)} children>)"
        )


_node_ids = itertools.count(0)
_node_lock = threading.Lock()


def _next_node_id() -> int:
    with _node_lock:
        return next(_node_ids)


@dataclass
class PlainNode:
    """A minimal node of the UI tree: a component, attributes and children."""

    component: Any = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["PlainNode"] = field(default_factory=list)
    id: int = field(default_factory=_next_node_id)

    @property
    def id_value(self) -> int:
        return self.id


def build_delegation_tree(
    node: Any, parent_delegate: EventDelegate | None = None
) -> EventDelegate:
    """Build a delegate for ``node`` and each of its descendants, linked as the nodes are."""
    delegate = EventDelegate(node.id_value)
    if parent_delegate is not None:
        delegate.set_parent(parent_delegate)
        parent_delegate.add_child(delegate)
    for child in node.children:
        child_delegate = build_delegation_tree(child, delegate)
        delegate.add_child(child_delegate)
    return delegate