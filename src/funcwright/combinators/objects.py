"""Object construction, mutation and method invocation helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, TypeVar

from funcwright.kernel.curry import curried, curry
from funcwright.kernel.errors import InvalidArgumentError
from funcwright.kernel.types import TypeTag, classify, is_array_like, is_callable

T = TypeVar("T")


def _bound_method(name: str, target: Any) -> Callable[..., Any]:
    if not hasattr(target, name):
        raise InvalidArgumentError("method", 'must exist on "object"', name)
    bound = getattr(target, name)
    if not is_callable(bound):
        raise InvalidArgumentError("method", "must be a function", bound)
    return bound


@curried(3)
def assign(name: Any, value: T, target: Any) -> T:
    """Set ``target[name]`` on mutable mappings, ``target.name`` otherwise.

    Returns the assigned value.
    """
    if target is None:
        raise InvalidArgumentError("object", "must be assignable", target)
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)
    return value


@curry
def modify(by: Mapping[Any, Callable[[Any], Any]], value: Mapping[Any, Any]) -> dict[Any, Any]:
    """Copy value, passing each key that has a transformer in by through it.

    A transformer returning None keeps the original entry.
    """
    if not isinstance(by, Mapping):
        raise InvalidArgumentError("by", "must be a mapping of functions", by)
    if not isinstance(value, Mapping):
        raise InvalidArgumentError("object", "must be a mapping", value)

    result: dict[Any, Any] = {}
    for key, current in value.items():
        transform = by.get(key)
        if transform is None:
            result[key] = current
            continue
        if not is_callable(transform):
            raise InvalidArgumentError("by", "must be a mapping of functions", transform)
        updated = transform(current)
        result[key] = current if updated is None else updated
    return result


@curry
def object_of(keys: Any, values: Any) -> dict[Any, Any]:
    """Build a dict from one key or a sequence of keys.

    ``object_of("a", 1)`` -> ``{"a": 1}``;
    ``object_of(["a", "b"], [1])`` -> ``{"a": 1, "b": None}``.
    """
    if classify(keys) is TypeTag.STRING:
        return {keys: values}
    if is_array_like(keys):
        if not is_array_like(values):
            raise InvalidArgumentError("values", "must be an array-like when keys is", values)
        return {key: values[index] if index < len(values) else None for index, key in enumerate(keys)}
    raise InvalidArgumentError("keys", "must be a string or an array-like", keys)


@curried(3)
def invoke(name: str, target: Any, *parameters: Any) -> Any:
    """``invoke("replace", "abc", "a", "x")`` -> ``"xbc"``."""
    return _bound_method(name, target)(*parameters)


@curried(2)
def method(name: str, target: Any, *parameters: Any) -> Any:
    """Like invoke but fires as soon as name and target are known."""
    return _bound_method(name, target)(*parameters)


@curried(1)
def trigger(name: str, *parameters: Any) -> Callable[[Any], Any]:
    """Freeze a method call to be run later against any target."""

    def triggered(target: Any) -> Any:
        return _bound_method(name, target)(*parameters)

    return triggered
