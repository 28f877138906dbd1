"""Runtime shape classification for generic values.

Every accessor in funcwright dispatches on a closed set of TypeTag values
rather than on open-ended reflection.
"""

from __future__ import annotations

import array
import inspect
from collections.abc import Callable, Mapping, Sequence, Set
from enum import Enum
from numbers import Number
from typing import Any


class TypeTag(str, Enum):
    """Shape categories understood by the library."""

    NONE = "None"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    TYPED_ARRAY = "TypedArray"
    ARRAY = "Array"
    MAPPING = "Mapping"
    SET = "Set"
    FUNCTION = "Function"
    AWAITABLE = "Awaitable"
    OBJECT = "Object"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


_TYPED_ARRAYS = (bytes, bytearray, memoryview, array.array)


def classify(value: Any) -> TypeTag:
    """Return the TypeTag describing the shape of value."""
    if value is None:
        return TypeTag.NONE
    # bool is a Number subclass, check it first
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, _TYPED_ARRAYS):
        return TypeTag.TYPED_ARRAY
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, Mapping):
        return TypeTag.MAPPING
    if isinstance(value, Set):
        return TypeTag.SET
    if isinstance(value, Sequence):
        return TypeTag.ARRAY
    if callable(value):
        return TypeTag.FUNCTION
    if inspect.isawaitable(value):
        return TypeTag.AWAITABLE
    if hasattr(value, "__dict__"):
        return TypeTag.OBJECT
    return TypeTag.OTHER


def is_callable(value: Any) -> bool:
    return callable(value)


def is_iterable(value: Any) -> bool:
    """True when iter() accepts value.

    Honours ``__iter__ = None``, the documented way to opt a sequence-shaped
    class out of iteration.
    """
    try:
        iter(value)
    except TypeError:
        return False
    return True


def is_array_like(value: Any) -> bool:
    """Sized and indexable, excluding strings, byte buffers, mappings and sets."""
    tag = classify(value)
    if tag is TypeTag.ARRAY:
        return True
    if tag in (TypeTag.STRING, TypeTag.TYPED_ARRAY, TypeTag.MAPPING, TypeTag.SET):
        return False
    return hasattr(type(value), "__len__") and hasattr(type(value), "__getitem__")


def is_like(tag: TypeTag, value: Any) -> bool:
    """Structural check: does value behave like the given tag?

    Looser than ``classify(value) is tag`` for FUNCTION, ARRAY, MAPPING and
    OBJECT; exact for everything else.
    """
    if tag is TypeTag.FUNCTION:
        return is_callable(value)
    if tag is TypeTag.ARRAY:
        return is_array_like(value)
    if tag is TypeTag.MAPPING:
        return isinstance(value, Mapping)
    if tag is TypeTag.AWAITABLE:
        return inspect.isawaitable(value)
    if tag is TypeTag.OBJECT:
        return classify(value) not in (
            TypeTag.NONE,
            TypeTag.BOOLEAN,
            TypeTag.NUMBER,
            TypeTag.STRING,
        )
    return classify(value) is tag


def declared_arity(fn: Callable[..., Any]) -> int | None:
    """Count the positional parameters of fn that have no default.

    Variadic and keyword-only parameters are not counted. Returns None when
    no signature is available (some builtins).
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in positional and param.default is inspect.Parameter.empty
    )
