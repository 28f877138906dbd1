"""Property and field accessors.

prop/has_prop are lenient, None-safe lookups over mappings, sequences and
attributes. field/has_field/includes dispatch on TypeTag and refuse shapes
they have no rule for.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import reduce
from typing import Any

from funcwright.kernel.curry import curry
from funcwright.kernel.errors import InvalidArgumentError, UnsupportedTypeError
from funcwright.kernel.types import TypeTag, classify, is_array_like

_INDEXABLE = (TypeTag.ARRAY, TypeTag.TYPED_ARRAY, TypeTag.STRING)


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _at(value: Any, index: Any) -> Any:
    """Index with negative support; None when out of range."""
    if not _is_index(index):
        return None
    if -len(value) <= index < len(value):
        return value[index]
    return None


def _get(value: Any, key: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(key)
    if classify(value) in _INDEXABLE:
        return _at(value, key)
    if isinstance(key, str):
        return getattr(value, key, None)
    return None


def _has(value: Any, key: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, Mapping):
        return key in value
    if classify(value) in _INDEXABLE:
        return _is_index(key) and -len(value) <= key < len(value)
    if isinstance(key, str):
        return hasattr(value, key)
    return False


def _require_keys(keys: Any, argument: str) -> None:
    if not is_array_like(keys):
        raise InvalidArgumentError(argument, "must be an array-like of keys", keys)


@curry
def prop(properties: Any, value: Any) -> Any:
    """Look up a key, index or attribute; a list/tuple walks a path.

    ``prop(["user", "name"], {"user": {"name": "ada"}})`` -> "ada". Missing
    steps yield None instead of raising.
    """
    if is_array_like(properties):
        return reduce(_get, properties, value)
    return _get(value, properties)


@curry
def props(properties: Any, value: Any) -> list[Any]:
    _require_keys(properties, "properties")
    return [prop(p, value) for p in properties]


@curry
def has_prop(properties: Any, value: Any) -> bool:
    """True when every step of the lookup path exists."""
    if not is_array_like(properties):
        return _has(value, properties)

    current = value
    for key in properties:
        if not _has(current, key):
            return False
        current = _get(current, key)
    return True


@curry
def has_props(properties: Any, value: Any) -> list[bool]:
    _require_keys(properties, "properties")
    return [has_prop(p, value) for p in properties]


_FIELD_GETTERS: dict[TypeTag, Callable[[Any, Any], Any]] = {
    TypeTag.ARRAY: _at,
    TypeTag.TYPED_ARRAY: _at,
    TypeTag.MAPPING: lambda obj, key: obj.get(key),
    TypeTag.OBJECT: lambda obj, key: vars(obj).get(key),
}

_FIELD_TESTS: dict[TypeTag, Callable[[Any, Any], bool]] = {
    TypeTag.ARRAY: lambda obj, key: key in obj,
    TypeTag.TYPED_ARRAY: lambda obj, key: key in obj,
    TypeTag.MAPPING: lambda obj, key: key in obj,
    TypeTag.SET: lambda obj, key: key in obj,
    TypeTag.OBJECT: lambda obj, key: key in vars(obj),
}

_MEMBERSHIP: dict[TypeTag, Callable[[Any, Any], bool]] = {
    TypeTag.ARRAY: lambda obj, item: item in obj,
    TypeTag.TYPED_ARRAY: lambda obj, item: item in obj,
    TypeTag.SET: lambda obj, item: item in obj,
    TypeTag.MAPPING: lambda obj, item: item in obj.values(),
}


def _dispatch(table: dict[TypeTag, Callable[[Any, Any], Any]], obj: Any, key: Any) -> Any:
    tag = classify(obj)
    handler = table.get(tag)
    if handler is None:
        raise UnsupportedTypeError(tag, obj)
    return handler(obj, key)


@curry
def field(key: Any, value: Any) -> Any:
    """Read one field by the rule for value's TypeTag.

    Arrays index (negative allowed, None when out of range), mappings use
    .get, plain objects read their own instance attributes.

    Raises:
        UnsupportedTypeError: value's TypeTag has no getter
    """
    return _dispatch(_FIELD_GETTERS, value, key)


@curry
def fields(keys: Any, value: Any) -> list[Any]:
    _require_keys(keys, "keys")
    return [field(key, value) for key in keys]


@curry
def has_field(key: Any, value: Any) -> bool:
    """Arrays test membership; mappings and sets test keys; objects test own attributes."""
    return _dispatch(_FIELD_TESTS, value, key)


@curry
def has_fields(keys: Any, value: Any) -> list[bool]:
    _require_keys(keys, "keys")
    return [has_field(key, value) for key in keys]


@curry
def includes(item: Any, value: Any) -> bool:
    """Membership among a container's elements (a mapping's values)."""
    return _dispatch(_MEMBERSHIP, value, item)
