"""Application helpers: calling functions with rearranged arguments."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, NoReturn, TypeVar

from funcwright.kernel.curry import curried, curry
from funcwright.kernel.errors import InvalidArgumentError
from funcwright.kernel.types import TypeTag, classify, is_callable

T = TypeVar("T")
R = TypeVar("R")


def _require_callable(value: Any, argument: str = "predicate") -> None:
    if not is_callable(value):
        raise InvalidArgumentError(argument, "must be a function", value)


def identity(value: T) -> T:
    return value


def raise_(error: BaseException | type[BaseException]) -> NoReturn:
    """Raise error; usable where only an expression is allowed."""
    if isinstance(error, BaseException) or (
        isinstance(error, type) and issubclass(error, BaseException)
    ):
        raise error
    raise InvalidArgumentError("error", "must be an exception", error)


@curried(2)
def apply(fn: Callable[..., R], parameters: Sequence[Any]) -> R:
    """``apply(max, [1, 2, 3])`` -> 3."""
    _require_callable(fn)
    if classify(parameters) is not TypeTag.ARRAY:
        raise InvalidArgumentError("parameters", "must be an array", parameters)
    return fn(*parameters)


@curried(2)
def apply_to(parameters: Sequence[Any], fn: Callable[..., R]) -> R:
    """apply with the argument order flipped."""
    _require_callable(fn)
    if classify(parameters) is not TypeTag.ARRAY:
        raise InvalidArgumentError("parameters", "must be an array-like", parameters)
    return fn(*parameters)


@curried(3)
def nary(length: int, fn: Callable[..., R], *parameters: Any) -> R:
    """Call fn with only the first length parameters."""
    _require_callable(fn)
    return fn(*parameters[:length])


unary = nary(1)
binary = nary(2)


@curried(2)
def partial(fn: Callable[..., R], *parameters: Any) -> Callable[..., R]:
    _require_callable(fn)
    return functools.partial(fn, *parameters)


@curried(2)
def defer(fn: Callable[..., R], *parameters: Any) -> Callable[[], R]:
    """Freeze a call into a zero-argument thunk."""
    _require_callable(fn)

    def thunk() -> R:
        return fn(*parameters)

    return thunk


@curry
def effect(fn: Callable[[T], Any], value: T) -> T:
    """Run fn for its side effect and return value unchanged."""
    _require_callable(fn)
    fn(value)
    return value


@curried(3)
def enforce(fn: Callable[..., Any], value: T, *parameters: Any) -> T:
    """Call fn with parameters, then return value regardless of the result."""
    _require_callable(fn)
    fn(*parameters)
    return value


def extract(*fns: Callable[..., Any]) -> Callable[..., list[Any]]:
    """Fan the same arguments out to every fn and collect the results."""
    if not all(is_callable(fn) for fn in fns):
        raise InvalidArgumentError("predicates", "must be an array of functions", fns)

    def extracted(*parameters: Any) -> list[Any]:
        return [fn(*parameters) for fn in fns]

    return extracted


@curried(2)
def satisfies(fn: Callable[..., Any], *parameters: Any) -> bool:
    _require_callable(fn)
    return bool(fn(*parameters))


@curried(2)
def construct(cls: Callable[..., R], *parameters: Any) -> R:
    _require_callable(cls, "constructor")
    return cls(*parameters)


@curry
def then(fn: Callable[[Any], Any], awaitable: Awaitable[Any]) -> Awaitable[Any]:
    """Chain fn onto an awaitable.

    Returns a coroutine resolving to fn's result; an awaitable result from fn
    is awaited too, so chains of then() flatten.
    """
    _require_callable(fn)
    if not inspect.isawaitable(awaitable):
        raise InvalidArgumentError("thenable", "must be awaitable", awaitable)

    async def chained() -> Any:
        result = fn(await awaitable)
        if inspect.isawaitable(result):
            result = await result
        return result

    return chained()
