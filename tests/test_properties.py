"""Property-based checks for the curry and compose engines."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from funcwright import aggregate, compose, curry


def collect(*args):
    return list(args)


@st.composite
def split_arguments(draw):
    """A list of arguments and a partition of it into consecutive non-empty calls."""
    args = draw(st.lists(st.integers(), min_size=1, max_size=8))
    cuts: set[int] = set()
    if len(args) > 1:
        cuts = draw(st.sets(st.integers(min_value=1, max_value=len(args) - 1)))
    bounds = [0, *sorted(cuts), len(args)]
    return args, [args[lo:hi] for lo, hi in zip(bounds, bounds[1:])]


@given(split_arguments())
def test_any_split_matches_direct_call(case):
    args, chunks = case
    result = curry(collect, len(args))
    for chunk in chunks:
        result = result(*chunk)
    assert result == collect(*args)


@given(st.lists(st.integers(), max_size=6), st.integers(min_value=0, max_value=6))
def test_oversupply_is_never_truncated(args, arity):
    if len(args) >= arity:
        assert curry(collect, arity)(*args) == args


@given(st.integers(min_value=-1000, max_value=1000))
def test_identity_aggregator_degenerates_to_compose(x):
    def apply_step(fn, *parameters):
        return fn(*parameters)

    steps = (lambda a, b: a * b, lambda n: [n, n + 1], lambda n: n - 3)
    assert aggregate(apply_step, *steps)(x) == compose(*steps)(x)


@given(st.integers(), st.integers())
def test_saturated_call_is_repeatable(a, b):
    adder = curry(lambda x, y: x + y)(a)
    assert adder(b) == adder(b) == a + b
