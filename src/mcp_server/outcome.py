from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, TypeVar, Union


T = TypeVar("T")


class FailureKind(str, Enum):
    VALIDATION = "validation"
    UNKNOWN_TOOL = "unknown_tool"
    UNKNOWN_RESOURCE = "unknown_resource"
    BUSINESS_RULE = "business_rule"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    """A failure returned as a value; the error mapper turns it into a JSON-RPC error.

    `context` is the caller-facing prefix ("Tool execution error", ...) and
    is attached by the protocol handler that owns the failure, not by the
    code that detected it.
    """

    kind: FailureKind
    message: str
    context: str | None = None

    def within(self, context: str) -> "Failure":
        return replace(self, context=context)

    @property
    def full_message(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


Outcome = Union[Ok[Any], Failure]


def validation_failure(message: str) -> Failure:
    return Failure(FailureKind.VALIDATION, message)


def business_failure(message: str) -> Failure:
    return Failure(FailureKind.BUSINESS_RULE, message)
