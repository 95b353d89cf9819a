"""Process-wide observability facade.

Call sites use `span`/`event`/`error`/`metric` without caring whether a trace
is active: with no active TraceContext every call is a no-op. Records only
reach a sink as part of the envelope published when the trace finishes.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol

from ..trace.context import TraceContext
from ..trace.envelope import SpanRecord, TraceEnvelope


class ObsSink(Protocol):
    def on_trace_end(self, envelope: TraceEnvelope) -> None: ...


_SINK: ObsSink | None = None


def set_sink(sink: ObsSink | None) -> None:
    global _SINK
    _SINK = sink


def get_sink() -> ObsSink | None:
    return _SINK


@contextmanager
def span(name: str, attrs: dict[str, Any] | None = None) -> Iterator[SpanRecord | None]:
    ctx = TraceContext.current()
    if ctx is None:
        yield None
        return

    with ctx.start_span(name, attrs) as s:
        yield s


def event(kind: str, attrs: dict[str, Any] | None = None) -> None:
    """Record an event on the innermost open span (or on the trace itself)."""
    ctx = TraceContext.current()
    if ctx is not None:
        ctx.add_event(kind, attrs)


def error(kind: str, attrs: dict[str, Any] | None = None) -> None:
    """Like `event`, but also flags the current span as failed.

    Failures in this server travel as values, never as exceptions, so the
    span status has to be set explicitly.
    """
    ctx = TraceContext.current()
    if ctx is None:
        return
    ctx.mark_error()
    ctx.add_event(kind, attrs)


def metric(name: str, value: float | int, attrs: dict[str, Any] | None = None) -> None:
    ctx = TraceContext.current()
    if ctx is not None:
        ctx.add_event("metric", {"name": name, "value": value, **(attrs or {})})
