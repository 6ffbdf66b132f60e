import copy

import pytest

from orbitui.hooks import (
    ComponentId,
    Context,
    LifecycleHooks,
    LifecyclePhase,
    UpdateScheduler,
)

_REGISTRATIONS = ("on_mount", "on_before_update", "on_update", "on_before_unmount", "on_unmount")


def test_component_id_generation():
    id1 = ComponentId.new()
    id2 = ComponentId.new()
    assert id1 != id2
    assert id1.id < id2.id
    assert str(id1).startswith("Component#")
    assert str(id1) == f"Component#{id1.id}"


def test_update_scheduler():
    scheduler = UpdateScheduler()
    component_id = ComponentId.new()

    assert not scheduler.has_pending_update(component_id)

    scheduler.schedule_update(component_id)
    assert scheduler.has_pending_update(component_id)

    pending = scheduler.pending_components()
    assert len(pending) == 1
    assert pending[0] == component_id

    scheduler.clear_pending(component_id)
    assert not scheduler.has_pending_update(component_id)


def test_scheduler_deduplicates_and_flags_batch():
    scheduler = UpdateScheduler()
    component_id = ComponentId.new()
    assert scheduler.batch_scheduled is False
    scheduler.schedule_update(component_id)
    scheduler.schedule_update(component_id)
    assert scheduler.pending_components() == [component_id]
    assert scheduler.batch_scheduled is True


def test_clear_unknown_component_is_harmless():
    scheduler = UpdateScheduler()
    scheduler.clear_pending(ComponentId.new())
    assert scheduler.pending_components() == []


@pytest.mark.parametrize(
    "register, phase",
    [
        ("on_mount", LifecyclePhase.MOUNTED),
        ("on_before_update", LifecyclePhase.BEFORE_UPDATE),
        ("on_update", LifecyclePhase.UPDATING),
        ("on_before_unmount", LifecyclePhase.BEFORE_UNMOUNT),
        ("on_unmount", LifecyclePhase.UNMOUNTED),
    ],
)
def test_hooks_run_for_their_phase(register, phase):
    hooks = LifecycleHooks()
    seen = []
    getattr(hooks, register)(seen.append)
    assert f"{register}=[1 callbacks]" in repr(hooks)
    hooks.execute(phase, "component")
    assert seen == ["component"]
    for other in LifecyclePhase:
        if other is not phase:
            hooks.execute(other, "other")
    assert seen == ["component"]


@pytest.mark.parametrize(
    "phase",
    [LifecyclePhase.CREATED, LifecyclePhase.MOUNTING, LifecyclePhase.UNMOUNTING],
)
def test_phases_without_hooks_do_nothing(phase):
    hooks = LifecycleHooks()
    seen = []
    for name in _REGISTRATIONS:
        getattr(hooks, name)(seen.append)
    text = repr(hooks)
    for name in _REGISTRATIONS:
        assert f"{name}=[1 callbacks]" in text
    hooks.execute(phase, "c")
    assert seen == []


def test_hooks_run_in_registration_order():
    hooks = LifecycleHooks()
    order = []
    hooks.on_mount(lambda c: order.append("a"))
    hooks.on_mount(lambda c: order.append("b"))
    hooks.execute(LifecyclePhase.MOUNTED, None)
    assert order == ["a", "b"]


def test_hooks_repr_counts_callbacks():
    hooks = LifecycleHooks()
    hooks.on_mount(lambda c: None)
    assert "on_mount=[1 callbacks]" in repr(hooks)
    assert "on_unmount=[0 callbacks]" in repr(hooks)


def test_context_defaults():
    context = Context()
    assert context.lifecycle_phase is LifecyclePhase.CREATED
    assert context.id != Context().id


def test_context_schedules_updates():
    context = Context()
    component_id = ComponentId.new()
    assert not context.has_pending_update(component_id)
    context.schedule_update(component_id)
    assert context.has_pending_update(component_id)


def test_context_register_and_execute_hooks():
    context = Context()
    seen = []
    context.register_lifecycle_hooks(lambda hooks: hooks.on_mount(seen.append))
    context.execute_lifecycle_hooks(LifecyclePhase.MOUNTED, "comp")
    assert seen == ["comp"]


def test_context_copy_shares_state_but_not_phase():
    context = Context()
    other = copy.copy(context)
    other.lifecycle_phase = LifecyclePhase.MOUNTED
    assert context.lifecycle_phase is LifecyclePhase.CREATED

    component_id = ComponentId.new()
    other.schedule_update(component_id)
    assert context.has_pending_update(component_id)

    seen = []
    other.register_lifecycle_hooks(lambda hooks: hooks.on_unmount(seen.append))
    context.execute_lifecycle_hooks(LifecyclePhase.UNMOUNTED, 1)
    assert seen == [1]
    assert other.id == context.id


def test_phase_values_match_names():
    assert LifecyclePhase.BEFORE_UPDATE.value == "BeforeUpdate"
    assert LifecyclePhase("Unmounted") is LifecyclePhase.UNMOUNTED