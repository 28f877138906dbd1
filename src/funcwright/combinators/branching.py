"""Conditional branching combinators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from funcwright.kernel.curry import curried
from funcwright.kernel.errors import InvalidArgumentError
from funcwright.kernel.types import is_callable


def _check(**fns: Any) -> None:
    for name, fn in fns.items():
        if not is_callable(fn):
            raise InvalidArgumentError(name, "must be a function", fn)


@curried(4)
def condition(
    predicate: Callable[..., Any],
    on_true: Callable[..., Any],
    on_false: Callable[..., Any],
    *parameters: Any,
) -> Any:
    """``on_true(*parameters)`` if predicate holds, else ``on_false(*parameters)``."""
    _check(predicate=predicate, on_true=on_true, on_false=on_false)
    if predicate(*parameters):
        return on_true(*parameters)
    return on_false(*parameters)


@curried(3)
def when(predicate: Callable[..., Any], on_true: Callable[..., Any], *parameters: Any) -> Any:
    """Apply on_true when predicate holds; otherwise return the first parameter."""
    _check(predicate=predicate, on_true=on_true)
    if predicate(*parameters):
        return on_true(*parameters)
    return parameters[0]


@curried(3)
def unless(predicate: Callable[..., Any], on_false: Callable[..., Any], *parameters: Any) -> Any:
    """Return the first parameter when predicate holds; otherwise apply on_false."""
    _check(predicate=predicate, on_false=on_false)
    if predicate(*parameters):
        return parameters[0]
    return on_false(*parameters)
