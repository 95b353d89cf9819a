"""Per-request trace context and envelope records."""

from .context import TraceContext
from .envelope import EventRecord, SpanRecord, TraceEnvelope

__all__ = ["TraceContext", "TraceEnvelope", "SpanRecord", "EventRecord"]
