"""Composition engine - right-to-left chains with an optional aggregator.

Each chain step receives the previous result either spread into
positional arguments or as one argument. By default the choice follows the
value's shape (StepMode.AUTO); spread() and passthrough() pin it per step.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from funcwright.kernel.curry import curried
from funcwright.kernel.errors import InvalidArgumentError, NotIterableError
from funcwright.kernel.trace import Trace
from funcwright.kernel.types import is_array_like, is_callable, is_iterable

logger = logging.getLogger(__name__)

Invoker = Callable[[Callable[..., Any], tuple[Any, ...], Mapping[str, Any]], Any]


class StepMode(str, Enum):
    """How a chain step receives the previous step's result."""

    AUTO = "auto"
    SPREAD = "spread"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class ChainStep:
    """A chain member with an optional pinned StepMode.

    A mode of None defers to the chain's ChainOptions.mode.
    """

    fn: Callable[..., Any]
    mode: StepMode | None = None

    def __post_init__(self) -> None:
        if not is_callable(self.fn):
            raise InvalidArgumentError("predicates", "must be a list of functions", self.fn)
        if self.mode is not None:
            try:
                object.__setattr__(self, "mode", StepMode(self.mode))
            except ValueError as exc:
                raise InvalidArgumentError("mode", "must be auto, spread or passthrough", self.mode) from exc

    @property
    def name(self) -> str:
        return getattr(self.fn, "__qualname__", None) or repr(self.fn)


@dataclass(frozen=True)
class ChainOptions:
    """Per-chain configuration.

    Attributes:
        mode: StepMode for steps without a pinned mode
        trace: Optional Trace receiving step events
    """

    mode: StepMode = StepMode.AUTO
    trace: Trace | None = None

    def mode_for(self, step: ChainStep) -> StepMode:
        return step.mode if step.mode is not None else self.mode


def spread(fn: Callable[..., Any]) -> ChainStep:
    """Pin a step to always receive the previous result spread."""
    if not is_callable(fn):
        raise InvalidArgumentError("predicate", "must be a function", fn)
    return ChainStep(fn, StepMode.SPREAD)


def passthrough(fn: Callable[..., Any]) -> ChainStep:
    """Pin a step to always receive the previous result as one argument."""
    if not is_callable(fn):
        raise InvalidArgumentError("predicate", "must be a function", fn)
    return ChainStep(fn, StepMode.PASSTHROUGH)


def _as_steps(callables: tuple[Any, ...]) -> tuple[ChainStep, ...]:
    if not callables:
        raise InvalidArgumentError("predicates", "must be a list of functions", callables)

    steps: list[ChainStep] = []
    for fn in callables:
        if isinstance(fn, ChainStep):
            steps.append(fn)
        elif is_callable(fn):
            steps.append(ChainStep(fn))
        else:
            raise InvalidArgumentError("predicates", "must be a list of functions", callables)
    return tuple(steps)


def _options(mode: StepMode | str, trace: Trace | None) -> ChainOptions:
    try:
        return ChainOptions(mode=StepMode(mode), trace=trace)
    except ValueError as exc:
        raise InvalidArgumentError("mode", "must be auto, spread or passthrough", mode) from exc


def _should_spread(value: Any, mode: StepMode) -> bool:
    if mode is StepMode.PASSTHROUGH:
        return False
    if mode is StepMode.AUTO and not is_array_like(value):
        return False
    if not is_iterable(value):
        raise NotIterableError(value)
    return True


def _walk(
    steps: tuple[ChainStep, ...],
    options: ChainOptions,
    invoke: Invoker,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
    run_id: int | None,
) -> Any:
    trace = options.trace
    value: Any = None
    for position in range(len(steps) - 1, -1, -1):
        step = steps[position]
        if position == len(steps) - 1:
            # The caller's own arguments reach the first step as given
            step_args, step_kwargs, spreads = args, kwargs, True
        else:
            spreads = _should_spread(value, options.mode_for(step))
            step_args = tuple(value) if spreads else (value,)
            step_kwargs = {}

        info = {"index": position, "step": step.name, "spread": spreads}
        start_time = time.perf_counter()
        try:
            value = invoke(step.fn, step_args, step_kwargs)
        except Exception as exc:
            logger.debug("chain step %s raised %r", step.name, exc)
            if trace is not None:
                trace.record(run_id, "step_error", info={**info, "error": str(exc)})
            raise
        if trace is not None:
            trace.record(run_id, "step", info=info, duration_ms=(time.perf_counter() - start_time) * 1000)

    if trace is not None:
        trace.record(run_id, "chain_end")
    return value


def _chain(steps: tuple[ChainStep, ...], options: ChainOptions, invoke: Invoker) -> Callable[..., Any]:
    """Build the callable that walks steps right-to-left through invoke.

    Each call walks its own locals; a trace run is opened per call.
    """

    def composed(*args: Any, **kwargs: Any) -> Any:
        if options.trace is None:
            return _walk(steps, options, invoke, args, kwargs, None)
        with options.trace.run(len(steps)) as run_id:
            return _walk(steps, options, invoke, args, kwargs, run_id)

    return composed


def _call_directly(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Any:
    return fn(*args, **kwargs)


def compose(
    *callables: Callable[..., Any] | ChainStep,
    mode: StepMode | str = StepMode.AUTO,
    trace: Trace | None = None,
) -> Callable[..., Any]:
    """Compose callables right-to-left.

    ``compose(f, g)(x)`` is ``f(g(x))``, or ``f(*g(x))`` when g returns a
    list, tuple or other array-like value.

    Args:
        *callables: Steps, leftmost applied last; bare callables or ChainStep
        mode: StepMode for steps not wrapped in spread()/passthrough()
        trace: Optional Trace receiving step events

    Raises:
        InvalidArgumentError: callables is empty or holds a non-callable
    """
    steps = _as_steps(callables)
    options = _options(mode, trace)
    logger.debug("compose chain of %d steps (mode=%s)", len(steps), options.mode.value)
    return _chain(steps, options, _call_directly)


@curried(2)
def aggregate(
    aggregator: Callable[..., Any],
    *callables: Callable[..., Any] | ChainStep,
    mode: StepMode | str = StepMode.AUTO,
    trace: Trace | None = None,
) -> Callable[..., Any]:
    """Compose callables right-to-left, routing every step through aggregator.

    Each step calls ``aggregator(step_fn, *value)`` (or
    ``aggregator(step_fn, value)`` for a single value) instead of
    ``step_fn(...)``. The aggregator decides whether and how to call step_fn.

    Curried: ``aggregate(agg)(f, g)`` equals ``aggregate(agg, f, g)``.
    """
    if not is_callable(aggregator):
        raise InvalidArgumentError("aggregator", "must be a function", aggregator)

    steps = _as_steps(callables)
    options = _options(mode, trace)

    def through_aggregator(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Any:
        return aggregator(fn, *args, **kwargs)

    logger.debug("aggregate chain of %d steps (mode=%s)", len(steps), options.mode.value)
    return _chain(steps, options, through_aggregator)


@curried(2)
def use(aggregator: Callable[..., Any], *callables: Callable[..., Any]) -> Callable[..., Any]:
    """Transform each argument with its own callable, then pass all to aggregator.

    ``use(agg, f, g)(a, b)`` is ``agg(f(a), g(b))``. A callable without a
    matching argument receives None.
    """
    if not is_callable(aggregator):
        raise InvalidArgumentError("aggregator", "must be a function", aggregator)
    if not all(is_callable(fn) for fn in callables):
        raise InvalidArgumentError("predicates", "must be an array of functions", callables)

    def used(*parameters: Any) -> Any:
        return aggregator(
            *(fn(parameters[index] if index < len(parameters) else None) for index, fn in enumerate(callables))
        )

    return used
