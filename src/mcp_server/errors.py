from __future__ import annotations

from typing import Any

from .jsonrpc.codec import INTERNAL_ERROR
from .jsonrpc.models import JsonRpcError, JsonRpcResponse
from .outcome import Failure, FailureKind, Ok


# Every failure kind surfaces as an internal error on the wire; the kind is
# still reported in `error.data` so clients can tell them apart.
FAILURE_CODES: dict[FailureKind, int] = {
    FailureKind.VALIDATION: INTERNAL_ERROR,
    FailureKind.UNKNOWN_TOOL: INTERNAL_ERROR,
    FailureKind.UNKNOWN_RESOURCE: INTERNAL_ERROR,
    FailureKind.BUSINESS_RULE: INTERNAL_ERROR,
    FailureKind.UNEXPECTED: INTERNAL_ERROR,
}


def map_failure_to_jsonrpc(failure: Failure) -> JsonRpcError:
    return JsonRpcError(
        code=FAILURE_CODES[failure.kind],
        message=failure.full_message,
        data={"kind": failure.kind.value},
    )


def map_outcome_to_response(req_id: Any, outcome: Any) -> JsonRpcResponse:
    """Package a handler outcome into a response envelope.

    Handlers return `Ok`/`Failure`; anything else is a programming error and
    is reported rather than sent as a bare result.
    """
    if isinstance(outcome, Ok):
        return JsonRpcResponse(id=req_id, result=outcome.value)
    if isinstance(outcome, Failure):
        return JsonRpcResponse(id=req_id, error=map_failure_to_jsonrpc(outcome))
    raise TypeError(f"handler returned unsupported outcome type: {type(outcome).__name__}")

