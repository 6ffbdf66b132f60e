"""Props definitions with defaults, required fields and validation."""

from __future__ import annotations

import dataclasses
import typing
from enum import Enum, auto
from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
P = TypeVar("P")

_REQUIRED_KEY = "orbitui_required"


class PropValidationError(Exception):
    """Base class for props validation problems."""


class MissingRequiredError(PropValidationError):
    """A required property was not given."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required property: {name}")


class InvalidValueError(PropValidationError):
    """A property had a value that failed validation."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid value for property {name}: {reason}")


class TypeMismatchError(PropValidationError):
    """A property had a value of the wrong type."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type mismatch for property {name}: expected {expected}, got {actual}"
        )


class MultipleValidationError(PropValidationError):
    """Several validation errors at once."""

    def __init__(self, errors: Iterable[PropValidationError]) -> None:
        self.errors = list(errors)
        lines = ["Multiple validation errors:\n"]
        lines.extend(f"  {number}. {error}\n" for number, error in enumerate(self.errors, 1))
        super().__init__("".join(lines))


def _combine(errors: list[PropValidationError]) -> None:
    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise MultipleValidationError(errors)


class _Kind(Enum):
    VALUE = auto()
    DEFAULT = auto()
    REQUIRED = auto()


class PropValue(Generic[T]):
    """A property slot that holds a value, a default factory, or nothing but is required."""

    __slots__ = ("_kind", "_payload")

    def __init__(self, kind: _Kind, payload: Any = None) -> None:
        self._kind = kind
        self._payload = payload

    @classmethod
    def of(cls, value: T) -> "PropValue[T]":
        return cls(_Kind.VALUE, value)

    @classmethod
    def with_default(cls, factory: Callable[[], T]) -> "PropValue[T]":
        return cls(_Kind.DEFAULT, factory)

    @classmethod
    def required(cls) -> "PropValue[T]":
        return cls(_Kind.REQUIRED)

    def get(self) -> T:
        """Return the value, falling back to the default; raise if required and unset."""
        if self._kind is _Kind.VALUE:
            return self._payload
        if self._kind is _Kind.DEFAULT:
            return self._payload()
        raise MissingRequiredError("Property is required")

    def set(self, value: T) -> None:
        self._kind = _Kind.VALUE
        self._payload = value

    def is_set(self) -> bool:
        return self._kind is _Kind.VALUE

    def __repr__(self) -> str:
        if self._kind is _Kind.VALUE:
            return f"PropValue.of({self._payload!r})"
        if self._kind is _Kind.DEFAULT:
            return "PropValue.with_default(...)"
        return "PropValue.required()"


def _run_validator(validator: Any, props: Any) -> None:
    validate = getattr(validator, "validate", None)
    if validate is not None:
        validate(props)
    else:
        validator(props)


class PropsBuilder(Generic[P]):
    """Holds a props object and validates it when built."""

    def __init__(self, props: P) -> None:
        self._props = props
        self._validator: Any = None

    def with_validator(self, validator: Any) -> "PropsBuilder[P]":
        self._validator = validator
        return self

    def build(self) -> P:
        if self._validator is not None:
            _run_validator(self._validator, self._props)
        return self._props


class CompositeValidator(Generic[P]):
    """Runs several validators and reports all their errors together."""

    def __init__(self, validators: Iterable[Any] = ()) -> None:
        self._validators = list(validators)

    def add(self, validator: Any) -> None:
        self._validators.append(validator)

    def validate(self, props: P) -> None:
        errors: list[PropValidationError] = []
        for validator in self._validators:
            try:
                _run_validator(validator, props)
            except PropValidationError as err:
                errors.append(err)
        _combine(errors)


@dataclasses.dataclass(frozen=True)
class FieldValidator:
    """Checks one attribute of a props object against a condition."""

    field: str
    condition: Callable[[Any], bool]
    message: str

    def validate(self, props: Any) -> None:
        if not self.condition(getattr(props, self.field)):
            raise InvalidValueError(self.field, str(self.message))


def validate_field(field: str, condition: Callable[[Any], bool], message: str) -> FieldValidator:
    """Create a validator requiring ``condition(props.<field>)`` to hold."""
    return FieldValidator(field, condition, message)


def prop(
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    required: bool = False,
) -> Any:
    """Declare a props field, optionally with a default or as required."""
    if default is not dataclasses.MISSING and default_factory is not dataclasses.MISSING:
        raise ValueError("cannot specify both default and default_factory")
    metadata = {_REQUIRED_KEY: required}
    if default is not dataclasses.MISSING:
        return dataclasses.field(default=default, metadata=metadata)
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(metadata=metadata)


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _type_default_factory(annotation: Any) -> Callable[[], Any]:
    if isinstance(annotation, type):
        try:
            annotation()
        except Exception:
            pass
        else:
            return annotation
    return lambda: None


def _builder(cls: type) -> PropsBuilder:
    return PropsBuilder(cls())


def define_props(cls: type) -> type:
    """Turn a class into a props dataclass whose every field has a default."""
    annotations = cls.__dict__.get("__annotations__", {})
    for name, annotation in annotations.items():
        if _is_class_var(annotation):
            continue
        current = cls.__dict__.get(name, dataclasses.MISSING)
        if isinstance(current, dataclasses.Field):
            if (
                current.default is dataclasses.MISSING
                and current.default_factory is dataclasses.MISSING
            ):
                current.default_factory = _type_default_factory(annotation)
        elif current is dataclasses.MISSING:
            setattr(
                cls,
                name,
                dataclasses.field(default_factory=_type_default_factory(annotation)),
            )
    data_cls = dataclasses.dataclass(cls)
    data_cls.builder = classmethod(_builder)
    return data_cls


class FieldsBuilder(Generic[P]):
    """Builds a props dataclass field by field, enforcing required fields."""

    def __init__(self, cls: type) -> None:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls!r} is not a props dataclass")
        self._cls = cls
        self._slots: dict[str, PropValue] = {}
        self._required: set[str] = set()
        for field in dataclasses.fields(cls):
            if not field.init:
                continue
            if field.metadata.get(_REQUIRED_KEY, False):
                self._slots[field.name] = PropValue.required()
                self._required.add(field.name)
            elif field.default is not dataclasses.MISSING:
                self._slots[field.name] = PropValue.with_default(
                    lambda value=field.default: value
                )
            elif field.default_factory is not dataclasses.MISSING:
                self._slots[field.name] = PropValue.with_default(field.default_factory)
            else:
                self._slots[field.name] = PropValue.required()
                self._required.add(field.name)

    def set(self, name: str, value: Any) -> "FieldsBuilder[P]":
        try:
            slot = self._slots[name]
        except KeyError:
            raise KeyError(f"unknown property: {name}") from None
        slot.set(value)
        return self

    def build(self) -> P:
        errors: list[PropValidationError] = []
        values: dict[str, Any] = {}
        for name, slot in self._slots.items():
            try:
                values[name] = slot.get()
            except MissingRequiredError:
                if name in self._required:
                    errors.append(MissingRequiredError(name))
        _combine(errors)
        return self._cls(**values)