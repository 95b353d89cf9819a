from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

from .codec import INTERNAL_ERROR, METHOD_NOT_FOUND
from .models import JsonRpcError, JsonRpcRequest, JsonRpcResponse


Handler = Callable[[JsonRpcRequest], Any]
ErrorMapper = Callable[[Exception], JsonRpcError]
OutcomeMapper = Callable[[Any, Any], JsonRpcResponse]


def default_error_mapper(exc: Exception) -> JsonRpcError:
    """Report an exception that escaped a handler; never leaks a traceback."""
    return JsonRpcError(
        code=INTERNAL_ERROR, message=f"Internal error: {exc}", data={"exc_type": type(exc).__name__}
    )


@dataclass
class Dispatcher:
    """JSON-RPC method dispatcher over a closed set of methods.

    `methods` is an Enum whose values are the wire method names. Every member
    must have a handler; a missing one is a construction error rather than a
    silent `Method not found` at runtime. `outcome_mapper` turns whatever a
    handler returns into the response envelope.
    """

    methods: type[Enum]
    handlers: Mapping[Enum, Handler]
    outcome_mapper: OutcomeMapper
    error_mapper: ErrorMapper = default_error_mapper

    def __post_init__(self) -> None:
        missing = [m.value for m in self.methods if m not in self.handlers]
        if missing:
            raise ValueError(f"no handler registered for methods: {', '.join(missing)}")
        extra = [k for k in self.handlers if not isinstance(k, self.methods)]
        if extra:
            raise TypeError(f"handler keys must be {self.methods.__name__} members")
        for m, handler in self.handlers.items():
            if not callable(handler):
                raise TypeError(f"handler for {m.value} must be callable")
        self.handlers = dict(self.handlers)

    def resolve(self, name: str) -> Enum | None:
        try:
            return self.methods(name)
        except ValueError:
            return None

    def handle(self, req: JsonRpcRequest) -> JsonRpcResponse:
        method = self.resolve(req.method)
        if method is None:
            return JsonRpcResponse(
                id=req.id, error=JsonRpcError(METHOD_NOT_FOUND, f"Method not found: {req.method}")
            )

        try:
            return self.outcome_mapper(req.id, self.handlers[method](req))
        except Exception as e:
            return JsonRpcResponse(id=req.id, error=self.error_mapper(e))
