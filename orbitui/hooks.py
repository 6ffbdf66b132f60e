"""Component identifiers, lifecycle phases and hooks, update scheduling and context."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from orbitui.context import ContextProvider
from orbitui.events import EventEmitter

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


@dataclass(frozen=True, order=True)
class ComponentId:
    """Unique identifier of a component instance."""

    id: int

    @classmethod
    def new(cls) -> "ComponentId":
        """Return a fresh identifier, larger than every one issued before."""
        with _id_lock:
            return cls(next(_id_counter))

    def __str__(self) -> str:
        return f"Component#{self.id}"


class LifecyclePhase(Enum):
    """Phase a component is in."""

    CREATED = "Created"
    MOUNTING = "Mounting"
    MOUNTED = "Mounted"
    BEFORE_UPDATE = "BeforeUpdate"
    UPDATING = "Updating"
    BEFORE_UNMOUNT = "BeforeUnmount"
    UNMOUNTING = "Unmounting"
    UNMOUNTED = "Unmounted"


LifecycleCallback = Callable[[Any], Any]


class LifecycleHooks:
    """Callbacks registered for lifecycle phases of a component."""

    _PHASES = {
        LifecyclePhase.MOUNTED: "mount",
        LifecyclePhase.BEFORE_UPDATE: "before_update",
        LifecyclePhase.UPDATING: "update",
        LifecyclePhase.BEFORE_UNMOUNT: "before_unmount",
        LifecyclePhase.UNMOUNTED: "unmount",
    }

    def __init__(self) -> None:
        self._callbacks: dict[str, list[LifecycleCallback]] = {
            name: [] for name in self._PHASES.values()
        }

    def on_mount(self, callback: LifecycleCallback) -> LifecycleCallback:
        self._callbacks["mount"].append(callback)
        return callback

    def on_before_update(self, callback: LifecycleCallback) -> LifecycleCallback:
        self._callbacks["before_update"].append(callback)
        return callback

    def on_update(self, callback: LifecycleCallback) -> LifecycleCallback:
        self._callbacks["update"].append(callback)
        return callback

    def on_before_unmount(self, callback: LifecycleCallback) -> LifecycleCallback:
        self._callbacks["before_unmount"].append(callback)
        return callback

    def on_unmount(self, callback: LifecycleCallback) -> LifecycleCallback:
        self._callbacks["unmount"].append(callback)
        return callback

    def execute(self, phase: LifecyclePhase, component: Any) -> None:
        """Run the callbacks of ``phase``; phases without hooks do nothing."""
        name = self._PHASES.get(phase)
        if name is None:
            return
        for callback in list(self._callbacks[name]):
            callback(component)

    def __repr__(self) -> str:
        counts = ", ".join(
            f"on_{name}=[{len(callbacks)} callbacks]"
            for name, callbacks in self._callbacks.items()
        )
        return f"LifecycleHooks({counts})"


class UpdateScheduler:
    """Records which components are waiting to be updated."""

    def __init__(self) -> None:
        self._pending: dict[ComponentId, bool] = {}
        self.batch_scheduled = False
        self._lock = threading.Lock()

    def schedule_update(self, component_id: ComponentId) -> None:
        with self._lock:
            self._pending[component_id] = True
            if not self.batch_scheduled:
                self.batch_scheduled = True

    def has_pending_update(self, component_id: ComponentId) -> bool:
        with self._lock:
            return component_id in self._pending

    def clear_pending(self, component_id: ComponentId) -> None:
        with self._lock:
            self._pending.pop(component_id, None)

    def pending_components(self) -> list[ComponentId]:
        with self._lock:
            return list(self._pending)

    def __repr__(self) -> str:
        return (
            f"UpdateScheduler(pending={self.pending_components()!r}, "
            f"batch_scheduled={self.batch_scheduled})"
        )


class Context:
    """Per-component context: events, lifecycle hooks, shared values and scheduling.

    A copy shares hooks, scheduler, events and provider but keeps its own phase.
    """

    def __init__(self) -> None:
        self.id = ComponentId.new()
        self.events = EventEmitter()
        self.lifecycle_hooks = LifecycleHooks()
        self.lifecycle_phase = LifecyclePhase.CREATED
        self.context_provider = ContextProvider()
        self.update_scheduler = UpdateScheduler()
        self._hooks_lock = threading.RLock()

    def __copy__(self) -> "Context":
        other = Context.__new__(Context)
        other.__dict__.update(self.__dict__)
        return other

    def schedule_update(self, component_id: ComponentId) -> None:
        self.update_scheduler.schedule_update(component_id)

    def has_pending_update(self, component_id: ComponentId) -> bool:
        return self.update_scheduler.has_pending_update(component_id)

    def register_lifecycle_hooks(self, setup: Callable[[LifecycleHooks], Any]) -> None:
        """Call ``setup`` with the hooks so it can register callbacks."""
        with self._hooks_lock:
            setup(self.lifecycle_hooks)

    def execute_lifecycle_hooks(self, phase: LifecyclePhase, component: Any) -> None:
        with self._hooks_lock:
            self.lifecycle_hooks.execute(phase, component)

    def __repr__(self) -> str:
        return (
            f"Context(id={self.id}, events={self.events!r}, "
            f"lifecycle_hooks=[LifecycleHooks], lifecycle_phase={self.lifecycle_phase.value}, "
            f"context_provider={self.context_provider!r})"
        )