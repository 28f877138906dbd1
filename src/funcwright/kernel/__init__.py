"""Kernel layer - curry and compose engines plus their collaborators."""

from funcwright.kernel.compose import (
    ChainOptions,
    ChainStep,
    StepMode,
    aggregate,
    compose,
    passthrough,
    spread,
    use,
)
from funcwright.kernel.curry import Curried, PartialApplication, curried, curry
from funcwright.kernel.errors import (
    FuncwrightError,
    InvalidArgumentError,
    NotIterableError,
    UnsupportedTypeError,
)
from funcwright.kernel.trace import Event, Trace
from funcwright.kernel.types import (
    TypeTag,
    classify,
    declared_arity,
    is_array_like,
    is_callable,
    is_iterable,
    is_like,
)

__all__ = [
    # Curry
    "curry",
    "curried",
    "Curried",
    "PartialApplication",
    # Composition
    "compose",
    "aggregate",
    "use",
    "spread",
    "passthrough",
    "ChainStep",
    "ChainOptions",
    "StepMode",
    # Tracing
    "Trace",
    "Event",
    # Types
    "TypeTag",
    "classify",
    "declared_arity",
    "is_array_like",
    "is_callable",
    "is_iterable",
    "is_like",
    # Errors
    "FuncwrightError",
    "InvalidArgumentError",
    "NotIterableError",
    "UnsupportedTypeError",
]
