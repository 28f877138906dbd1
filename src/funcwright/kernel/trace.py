"""In-memory trace of composed chain executions.

A Trace is passed to compose()/aggregate() and receives one event per
chain step. It is observation only: it never changes what a chain computes.

Every invocation of a traced chain opens its own run. Events carry that
run's id, so overlapping invocations (threads, tasks, re-entrant calls)
never share bookkeeping. The enclosing run of a nested chain is read from a
context variable, which is private to each thread and asyncio task.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

_active_run: ContextVar[int | None] = ContextVar("funcwright_active_run", default=None)


@dataclass(frozen=True)
class Event:
    """A single recorded chain event.

    Attributes:
        action: chain_begin, step, step_error or chain_end
        run_id: Invocation the event belongs to
        parent_run: Run of the chain that called this one as a step, if any
        info: Step index, step name, spread flag, error text
        duration_ms: Wall time of the step call
    """

    action: str
    run_id: int
    parent_run: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Collects chain events grouped by run."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Event] = []
        self._run_ids = itertools.count()

    @contextmanager
    def run(self, steps: int) -> Iterator[int | None]:
        """Open a run for one chain invocation and yield its id.

        Records chain_begin on entry. Yields None when tracing is disabled.
        """
        if not self.enabled:
            yield None
            return

        run_id = next(self._run_ids)
        parent_run = _active_run.get()
        token = _active_run.set(run_id)
        try:
            self._events.append(
                Event(action="chain_begin", run_id=run_id, parent_run=parent_run, info={"steps": steps})
            )
            yield run_id
        finally:
            _active_run.reset(token)

    def record(
        self,
        run_id: int | None,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Append an event to run_id; a None run (tracing disabled) is ignored."""
        if run_id is None or not self.enabled:
            return
        self._events.append(Event(action=action, run_id=run_id, info=info or {}, duration_ms=duration_ms))

    def get_events(self, run_id: int | None = None) -> list[Event]:
        """All events, or only those of one run."""
        if run_id is None:
            return list(self._events)
        return [e for e in self._events if e.run_id == run_id]

    def find_all(self, **kwargs: Any) -> list[Event]:
        """Events whose attribute or info entry matches every criterion."""
        return [
            e
            for e in self._events
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def runs(self) -> dict[int, list[Event]]:
        """Events grouped by run id, in recording order."""
        grouped: dict[int, list[Event]] = {}
        for ev in self._events:
            grouped.setdefault(ev.run_id, []).append(ev)
        return grouped

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._run_ids = itertools.count()
