"""Test chain tracing using pytest."""

import threading

import pytest

from funcwright import Trace, compose, aggregate
from fakes import Boom, explode


def inc(x):
    return x + 1


def pair(x):
    return [x, x]


def test_trace_records_steps_right_to_left():
    trace = Trace()
    compose(max, pair, inc, trace=trace)(1)

    steps = trace.find_all(action="step")
    assert [e.info["index"] for e in steps] == [2, 1, 0]
    assert [e.info["step"] for e in steps] == ["inc", "pair", "max"]
    assert [e.info["spread"] for e in steps] == [True, False, True]
    assert all(e.duration_ms is not None for e in steps)


def test_trace_brackets_chain():
    trace = Trace()
    compose(inc, trace=trace)(1)

    events = trace.get_events()
    assert [e.action for e in events] == ["chain_begin", "step", "chain_end"]
    assert events[0].info == {"steps": 1}
    assert {e.run_id for e in events} == {0}
    assert events[0].parent_run is None


def test_trace_records_step_error_and_reraises():
    trace = Trace()
    with pytest.raises(Boom):
        compose(inc, explode, trace=trace)(1)

    errors = trace.find_all(action="step_error")
    assert len(errors) == 1
    assert errors[0].info["error"] == "step failed"
    assert not trace.find_all(action="chain_end")


def test_each_invocation_gets_its_own_run():
    trace = Trace()
    chain = compose(inc, inc, trace=trace)
    chain(0)
    chain(10)

    runs = trace.runs()
    assert sorted(runs) == [0, 1]
    for events in runs.values():
        assert [e.action for e in events] == ["chain_begin", "step", "step", "chain_end"]


def test_nested_chain_links_to_outer_run():
    trace = Trace()
    inner = compose(inc, inc, trace=trace)
    compose(inc, inner, trace=trace)(0)

    outer, nested = trace.find_all(action="chain_begin")
    assert outer.parent_run is None
    assert nested.parent_run == outer.run_id
    assert nested.run_id != outer.run_id


def test_reentrant_call_keeps_runs_apart():
    trace = Trace()

    def countdown(n):
        return chain(n - 1) if n > 0 else 0

    chain = compose(inc, countdown, trace=trace)
    assert chain(2) == 3

    begins = trace.find_all(action="chain_begin")
    assert [e.parent_run for e in begins] == [None, begins[0].run_id, begins[1].run_id]
    for events in trace.runs().values():
        assert [e.action for e in events] == ["chain_begin", "step", "step", "chain_end"]


def test_overlapping_threads_do_not_share_runs():
    trace = Trace()
    barrier = threading.Barrier(2)

    def rendezvous(x):
        barrier.wait(timeout=5)
        return x

    chain = compose(inc, rendezvous, trace=trace)
    results = {}

    def worker(x):
        results[x] = chain(x)

    threads = [threading.Thread(target=worker, args=(x,)) for x in (1, 100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {1: 2, 100: 101}
    runs = trace.runs()
    assert len(runs) == 2
    for events in runs.values():
        assert [e.action for e in events] == ["chain_begin", "step", "step", "chain_end"]
        assert events[0].parent_run is None


def test_disabled_trace_records_nothing():
    trace = Trace(enabled=False)
    assert compose(inc, inc, trace=trace)(0) == 2
    assert len(trace) == 0


def test_aggregate_is_traced():
    trace = Trace()
    aggregate(lambda fn, x: fn(x), inc, inc, trace=trace)(0)
    assert len(trace.find_all(action="step")) == 2


def test_clear_resets_run_ids():
    trace = Trace()
    chain = compose(inc, trace=trace)
    chain(0)
    chain(0)
    trace.clear()
    assert len(trace) == 0

    chain(0)
    assert list(trace.runs()) == [0]
