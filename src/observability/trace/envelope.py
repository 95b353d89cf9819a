from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


JsonDict = dict[str, Any]

TRACE_SCHEMA_VERSION = "rpc_trace.v1"

# Kinds that count towards `aggregates.error_count`.
FAILURE_KINDS: frozenset[str] = frozenset({"error", "tool.failure"})


@dataclass(frozen=True)
class EventRecord:
    ts: float
    kind: str
    attrs: JsonDict = field(default_factory=dict)

    def to_dict(self) -> JsonDict:
        return {"ts": self.ts, "kind": self.kind, "attrs": self.attrs}


@dataclass
class SpanRecord:
    span_id: str
    name: str
    parent_span_id: str | None
    start_ts: float
    end_ts: float | None = None
    status: str = "ok"  # ok|error
    attrs: JsonDict = field(default_factory=dict)
    events: list[EventRecord] = field(default_factory=list)

    def close(self, ts: float, *, failed: bool = False) -> None:
        if failed:
            self.status = "error"
        if self.end_ts is None:
            self.end_ts = ts

    def to_dict(self) -> JsonDict:
        return {
            "span_id": self.span_id,
            "name": self.name,
            "parent_span_id": self.parent_span_id,
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "status": self.status,
            "attrs": self.attrs,
            "events": [e.to_dict() for e in self.events],
        }


@dataclass
class TraceEnvelope:
    """Everything recorded while handling one JSON-RPC request."""

    trace_id: str
    start_ts: float
    end_ts: float
    trace_type: str = "rpc"
    method: str | None = None
    request_id: Any = None
    status: str = "ok"  # ok|error
    spans: list[SpanRecord] = field(default_factory=list)
    events: list[EventRecord] = field(default_factory=list)  # outside any span
    aggregates: JsonDict = field(default_factory=dict)
    schema_version: str = TRACE_SCHEMA_VERSION

    def to_dict(self) -> JsonDict:
        return {
            "schema_version": self.schema_version,
            "trace_id": self.trace_id,
            "trace_type": self.trace_type,
            "method": self.method,
            "request_id": self.request_id,
            "status": self.status,
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "spans": [s.to_dict() for s in self.spans],
            "events": [e.to_dict() for e in self.events],
            "aggregates": self.aggregates,
        }

    def iter_event_kinds(self) -> Iterable[str]:
        for s in self.spans:
            for ev in s.events:
                yield ev.kind
        for ev in self.events:
            yield ev.kind


def compute_aggregates(envelope: TraceEnvelope) -> JsonDict:
    kinds = list(envelope.iter_event_kinds())
    return {
        "duration_ms": round((envelope.end_ts - envelope.start_ts) * 1000.0, 3),
        "span_count": len(envelope.spans),
        "event_count": len(kinds),
        "error_count": sum(1 for k in kinds if k in FAILURE_KINDS),
        "tool_calls": kinds.count("tool.call"),
    }
