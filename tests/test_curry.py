"""Tests for curry argument accumulation."""

from __future__ import annotations

import math

import pytest

from funcwright import Curried, InvalidArgumentError, PartialApplication, curried, curry
from fakes import Boom, Recorder, explode


def add3(a, b, c):
    return a + b + c


class TestCurryAccumulation:
    def test_all_at_once(self):
        assert curry(add3)(1, 2, 3) == 6

    def test_one_at_a_time(self):
        assert curry(add3)(1)(2)(3) == 6

    def test_mixed_splits(self):
        assert curry(add3)(1, 2)(3) == 6
        assert curry(add3)(1)(2, 3) == 6

    def test_partial_returns_curried(self):
        step = curry(add3)(1)
        assert isinstance(step, Curried)
        assert step.args == (1,)
        assert step.remaining == 2
        assert step.arity == 3

    def test_empty_call_does_not_advance(self):
        step = curry(add3)(1)()
        assert isinstance(step, Curried)
        assert step.remaining == 2

    def test_prefix_is_not_shared_between_branches(self):
        base = curry(add3)(100)
        assert base(1, 1) == 102
        assert base(2, 2) == 104
        assert base.args == (100,)

    def test_extra_arguments_pass_through(self):
        collect = curry(lambda a, b, c=None: [a, b, c], 2)
        assert collect(1, 2, 3) == [1, 2, 3]

    def test_variadic_extra_arguments(self):
        gather = curry(lambda *xs: list(xs), 2)
        assert gather(1)(2, 3, 4) == [1, 2, 3, 4]

    def test_keyword_arguments_accumulate(self):
        fn = Recorder(result="done")
        curry(fn, 2)(1, sep="-")(2, end="!")
        assert fn.calls == [((1, 2), {"sep": "-", "end": "!"})]

    def test_later_keyword_overrides_earlier(self):
        fn = Recorder(result=None)
        curry(fn, 1)(sep="-")(1, sep="+")
        assert fn.calls == [((1,), {"sep": "+"})]


class TestCurryArity:
    def test_zero_arity_fires_immediately(self):
        fn = Recorder(result=42)
        assert curry(fn, 0)() == 42
        assert fn.calls == [((), {})]

    def test_zero_arity_forwards_arguments(self):
        fn = Recorder(compute=lambda *args: args)
        assert curry(fn, 0)("a", "b") == ("a", "b")

    def test_declared_arity_ignores_defaults_and_varargs(self):
        def fn(a, b, c=3, *rest, flag=False):
            return (a, b, c, rest, flag)

        assert curry(fn)(1)(2) == (1, 2, 3, (), False)

    def test_explicit_arity_overrides_declared(self):
        assert isinstance(curry(add3, 4)(1, 2, 3), Curried)
        with pytest.raises(TypeError):
            curry(add3, 4)(1, 2)(3, 4)

    def test_builtin_with_signature(self):
        assert curry(math.pow)(2)(10) == 1024

    def test_curry_of_curried_uses_remaining(self):
        recurried = curry(curry(add3)(1))
        assert recurried.arity == 2
        assert recurried(2)(3) == 6

    def test_saturated_calls_are_repeatable(self):
        fn = Recorder(compute=lambda a, b: a * b)
        curried_fn = curry(fn, 2)(3)
        assert curried_fn(4) == 12
        assert curried_fn(4) == 12
        assert len(fn.calls) == 2


class TestCurryValidation:
    @pytest.mark.parametrize("value", [None, 1, "add", [add3]])
    def test_rejects_non_callable(self, value):
        with pytest.raises(InvalidArgumentError) as excinfo:
            curry(value)
        assert excinfo.value.argument == "predicate"
        assert excinfo.value.raw_value is value

    @pytest.mark.parametrize("arity", [-1, 1.5, "2", True])
    def test_rejects_bad_arity(self, arity):
        with pytest.raises(InvalidArgumentError) as excinfo:
            curry(add3, arity)
        assert excinfo.value.argument == "length"

    def test_invalid_argument_is_a_type_error(self):
        with pytest.raises(TypeError):
            curry(None)

    def test_downstream_errors_propagate_unchanged(self):
        with pytest.raises(Boom):
            curry(explode, 2)(1)(2)


class TestCurriedWrapper:
    def test_preserves_metadata(self):
        wrapped = curry(add3)
        assert wrapped.__name__ == "add3"
        assert wrapped.__wrapped__ is add3

    def test_repr_shows_progress(self):
        assert repr(curry(add3)(1)) == "<curried add3 1/3>"

    def test_partial_application_is_immutable(self):
        application = PartialApplication(fn=add3, arity=3)
        longer = application.accumulate((1,), {})
        assert application.args == ()
        assert longer.args == (1,)
        assert longer.remaining == 2
        assert not longer.saturated

    def test_default_keywords_are_empty(self):
        application = PartialApplication(fn=add3, arity=3)
        assert application.kwargs == {}
        assert application.accumulate((1, 2, 3), {}).fire() == 6

    def test_remaining_never_negative(self):
        application = PartialApplication(fn=add3, arity=1, args=(1, 2, 3))
        assert application.remaining == 0
        assert application.saturated

    def test_decorator_form(self):
        @curried(2)
        def pair(*items):
            return items

        assert pair("a")("b") == ("a", "b")
