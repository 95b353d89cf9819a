"""User-facing observability API (span/event/metric)."""

from .api import error, event, get_sink, metric, set_sink, span

__all__ = ["span", "event", "error", "metric", "set_sink", "get_sink"]
