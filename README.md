# orbitui

Building blocks for UI component trees, in plain Python with no third-party
dependencies:

- `orbitui.props`: props dataclasses with defaults and required fields, and
  validators that report every problem at once.
- `orbitui.context`: `ContextProvider` for typed values passed down a tree
  with fallback to a parent, and `Callback` props.
- `orbitui.events`: a typed `Dispatcher`, a type-keyed `EventEmitter`, and
  the event error classes.
- `orbitui.hooks`: `ComponentId`, `LifecyclePhase`, `LifecycleHooks`,
  `UpdateScheduler` and the per-component `Context` that ties them together.
- `orbitui.delegation`: `EventDelegate` with capturing, target and bubbling
  phases, `stop_propagation` and `prevent_default`, and
  `build_delegation_tree` for building delegates from a node tree.

## Installation

```
pip install orbitui
```

## Props

`define_props` turns a class into a dataclass in which every field has a
default, and adds a `builder()` class method returning a `PropsBuilder`.
`prop(...)` declares a field with a `default`, a `default_factory`, or as
`required`. `FieldsBuilder` fills a props class field by field and refuses
to build while a required field is unset.

```python
from orbitui.props import FieldsBuilder, MissingRequiredError, define_props, prop

@define_props
class ButtonProps:
    label: str = prop(required=True)
    width: int = prop(default=100)

props = FieldsBuilder(ButtonProps).set("label", "OK").build()
# ButtonProps(label='OK', width=100)

FieldsBuilder(ButtonProps).build()   # raises MissingRequiredError("label")
```

Validators are objects with a `validate(props)` method, or plain callables.
`validate_field` builds one from a field name, a predicate and a message;
`CompositeValidator` runs several and raises the single error, or a
`MultipleValidationError` listing all of them.

```python
from orbitui.props import CompositeValidator, InvalidValueError, validate_field

checks = CompositeValidator()
checks.add(validate_field("width", lambda w: w > 0, "must be positive"))
checks.add(validate_field("label", bool, "must not be empty"))

ButtonProps.builder().with_validator(checks).build()
# raises InvalidValueError: Invalid value for property label: must not be empty
```

`PropValue` is the slot type behind `FieldsBuilder`: `PropValue.of(value)`,
`PropValue.with_default(factory)` or `PropValue.required()`, read with
`get()` and filled with `set()`.

## Context values

```python
from orbitui.context import ContextProvider, callback

parent = ContextProvider()
parent.provide(42)
child = ContextProvider.with_parent(parent)
child.provide("hello")

child.consume(int)    # 42, found in the parent
child.consume(str)    # "hello"
child.consume(float)  # None
child.has(float)      # False
child.remove(str)     # True; only the child's own value is removed

on_click = callback(lambda n: n * 2)
on_click.call(21)     # 42
```

## Events

```python
from dataclasses import dataclass
from orbitui.events import Dispatcher, DispatchError, EventEmitter

@dataclass
class Click:
    x: int
    y: int

dispatcher = Dispatcher()

@dispatcher.on
def log(event):
    print("clicked at", event.x, event.y)

dispatcher.dispatch(Click(1, 2))
```

Every handler runs; if any of them raise, `dispatch` raises a
`DispatchError` whose `errors` holds each message. `EventEmitter.on(cls,
handler)` registers a handler for events whose type is exactly `cls`, and
`emit(event)` calls them.

## Lifecycle hooks and update scheduling

```python
from orbitui.hooks import ComponentId, Context, LifecyclePhase

context = Context()
context.register_lifecycle_hooks(
    lambda hooks: hooks.on_mount(lambda component: print("mounted", component))
)
context.execute_lifecycle_hooks(LifecyclePhase.MOUNTED, "my component")

component_id = ComponentId.new()
context.schedule_update(component_id)
context.has_pending_update(component_id)   # True
```

Hooks exist for the `MOUNTED`, `BEFORE_UPDATE`, `UPDATING`,
`BEFORE_UNMOUNT` and `UNMOUNTED` phases; other phases run nothing.
`ComponentId.new()` returns identifiers that increase with every call and
print as `Component#<n>`.

## Event delegation

```python
from dataclasses import dataclass
from orbitui.delegation import EventDelegate

@dataclass
class Click:
    x: int
    y: int

root = EventDelegate(1)
child = EventDelegate(2)
child.set_parent(root)
root.add_child(child)

child.on(Click, lambda event, propagation: print("at target"))
root.bubble(Click, lambda event, propagation: print("bubbled to root"))

propagation = child.dispatch(Click(1, 2), 2)
```

`dispatch(event, target_id)` runs capturing handlers from the delegate down
towards the target, then the target handlers if the delegate is the target,
then bubbling handlers from the delegate up through its parents. A handler
that calls `propagation.stop_propagation()` ends the journey. The returned
`EventPropagation` records the last phase and whether the default was
prevented.

`build_delegation_tree(node)` creates one delegate per node of any tree
whose nodes have an `id_value` and `children`, such as `PlainNode`.

## What this package does not do

It has no component base class, no object that drives a component through
mount, update and unmount, no renderer, no layout engine and no hit testing
of points against a layout. `LifecyclePhase`, `LifecycleHooks` and
`UpdateScheduler` record phases, callbacks and pending updates, but calling
the hooks and acting on pending updates is left to the caller. There is no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```