from __future__ import annotations

import contextvars
import sys
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from .envelope import EventRecord, SpanRecord, TraceEnvelope, compute_aggregates


_CTX: contextvars.ContextVar["TraceContext | None"] = contextvars.ContextVar("trace_context", default=None)


def _now() -> float:
    return time.time()


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


@dataclass
class TraceContext:
    """Trace state for one JSON-RPC request.

    A fresh context is created per request and bound to the current thread
    (or task) with `activate`, so concurrent requests never share spans.
    """

    trace_id: str
    start_ts: float
    trace_type: str = "rpc"
    method: str | None = None
    request_id: Any = None
    spans: list[SpanRecord] = field(default_factory=list)
    events: list[EventRecord] = field(default_factory=list)
    _open: list[SpanRecord] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        trace_id: str | None = None,
        *,
        trace_type: str = "rpc",
        method: str | None = None,
        request_id: Any = None,
    ) -> "TraceContext":
        return cls(
            trace_id=trace_id or _new_id("trace"),
            start_ts=_now(),
            trace_type=trace_type,
            method=method,
            request_id=request_id,
        )

    @classmethod
    def current(cls) -> "TraceContext | None":
        return _CTX.get()

    @classmethod
    @contextmanager
    def activate(cls, ctx: "TraceContext") -> Iterator["TraceContext"]:
        token = _CTX.set(ctx)
        try:
            yield ctx
        finally:
            _CTX.reset(token)

    def current_span(self) -> SpanRecord | None:
        return self._open[-1] if self._open else None

    @contextmanager
    def start_span(self, name: str, attrs: dict[str, Any] | None = None) -> Iterator[SpanRecord]:
        parent = self.current_span()
        s = SpanRecord(
            span_id=_new_id("span"),
            name=name,
            parent_span_id=parent.span_id if parent else None,
            start_ts=_now(),
            attrs=dict(attrs or {}),
        )
        self.spans.append(s)
        self._open.append(s)

        failed = False
        try:
            yield s
        except Exception as e:
            failed = True
            self.add_event("error", {"exc_type": type(e).__name__, "message": str(e)})
            raise
        finally:
            if self._open and self._open[-1] is s:
                self._open.pop()
            s.close(_now(), failed=failed)

    def add_event(self, kind: str, attrs: dict[str, Any] | None = None) -> EventRecord:
        ev = EventRecord(ts=_now(), kind=kind, attrs=dict(attrs or {}))
        cur = self.current_span()
        (cur.events if cur is not None else self.events).append(ev)
        return ev

    def mark_error(self) -> None:
        """Flag the innermost open span as failed without raising through it."""
        cur = self.current_span()
        if cur is not None:
            cur.status = "error"

    def _close_leaked_spans(self) -> None:
        if not self._open:
            return
        self.events.append(EventRecord(ts=_now(), kind="warn.span_leak", attrs={"open_span_count": len(self._open)}))
        while self._open:
            self._open.pop().close(_now(), failed=True)

    def finish(self) -> TraceEnvelope:
        """Seal the trace and hand it to the installed sink, if any."""
        self._close_leaked_spans()
        envelope = TraceEnvelope(
            trace_id=self.trace_id,
            start_ts=self.start_ts,
            end_ts=_now(),
            trace_type=self.trace_type,
            method=self.method,
            request_id=self.request_id,
            status="error" if any(s.status == "error" for s in self.spans) else "ok",
            spans=list(self.spans),
            events=list(self.events),
        )
        envelope.aggregates = compute_aggregates(envelope)

        from ..obs import api as obs

        sink = obs.get_sink()
        if sink is not None:
            # A failing sink must not fail the request being traced.
            try:
                sink.on_trace_end(envelope)
            except OSError as e:
                print(f"trace sink write failed: {e}", file=sys.stderr)
        return envelope
