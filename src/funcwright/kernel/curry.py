"""Curry engine - argument accumulation up to an arity threshold."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Annotated, Any, Generic, TypeVar

from pydantic import Field, TypeAdapter, ValidationError

from funcwright.kernel.errors import InvalidArgumentError
from funcwright.kernel.types import declared_arity, is_callable

logger = logging.getLogger(__name__)

R = TypeVar("R")
F = TypeVar("F", bound=Callable[..., Any])

_ARITY = TypeAdapter(Annotated[int, Field(ge=0, strict=True)])

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class PartialApplication(Generic[R]):
    """Immutable snapshot of a curried call in progress.

    Attributes:
        fn: The wrapped callable, never mutated
        arity: Positional argument count that triggers the call
        args: Positional arguments bound so far, in order
        kwargs: Keyword arguments bound so far; they do not count toward arity
    """

    fn: Callable[..., R]
    arity: int
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @property
    def remaining(self) -> int:
        return max(self.arity - len(self.args), 0)

    @property
    def saturated(self) -> bool:
        return len(self.args) >= self.arity

    def accumulate(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> PartialApplication[R]:
        """Return a new application with args appended and kwargs merged."""
        merged = self.kwargs
        if kwargs:
            merged = MappingProxyType({**self.kwargs, **kwargs})
        return PartialApplication(
            fn=self.fn,
            arity=self.arity,
            args=self.args + args,
            kwargs=merged,
        )

    def fire(self) -> R:
        return self.fn(*self.args, **self.kwargs)


class Curried(Generic[R]):
    """Callable front for a PartialApplication.

    Calling it either fires the wrapped function (threshold reached) or
    returns a new Curried holding the longer prefix. The instance itself is
    never changed by a call.
    """

    def __init__(self, application: PartialApplication[R]) -> None:
        self._application = application
        functools.update_wrapper(self, application.fn, updated=())

    @property
    def application(self) -> PartialApplication[R]:
        return self._application

    @property
    def arity(self) -> int:
        return self._application.arity

    @property
    def remaining(self) -> int:
        return self._application.remaining

    @property
    def args(self) -> tuple[Any, ...]:
        return self._application.args

    def __call__(self, *args: Any, **kwargs: Any) -> R | Curried[R]:
        application = self._application.accumulate(args, kwargs)
        if application.saturated:
            return application.fire()
        return Curried(application)

    def __repr__(self) -> str:
        name = getattr(self._application.fn, "__qualname__", repr(self._application.fn))
        return f"<curried {name} {len(self.args)}/{self.arity}>"


def curry(fn: Callable[..., R], arity: int | None = None) -> Curried[R]:
    """Wrap fn so it accumulates positional arguments until arity is met.

    Args:
        fn: Callable to wrap
        arity: Threshold; defaults to the count of fn's required positional
            parameters (or the remaining count when fn is already curried)

    Returns:
        Curried wrapper. Calling it with enough arguments returns fn's
        result; otherwise returns another Curried.

    Raises:
        InvalidArgumentError: fn is not callable, or arity is not a
            non-negative int, or arity cannot be derived from fn
    """
    if not is_callable(fn):
        raise InvalidArgumentError("predicate", "must be a function", fn)

    if arity is None:
        if isinstance(fn, Curried):
            arity = fn.remaining
        else:
            arity = declared_arity(fn)
            if arity is None:
                raise InvalidArgumentError(
                    "length",
                    f"cannot be read from {fn!r}; pass an explicit arity",
                    fn,
                )

    try:
        arity = _ARITY.validate_python(arity)
    except ValidationError as exc:
        raise InvalidArgumentError("length", "must be a non-negative integer", arity) from exc

    logger.debug("curry %r at arity %d", fn, arity)
    return Curried(PartialApplication(fn=fn, arity=arity))


def curried(arity: int) -> Callable[[F], Curried[Any]]:
    """Decorator form of curry with an explicit arity."""

    def decorator(fn: F) -> Curried[Any]:
        return curry(fn, arity)

    return decorator
