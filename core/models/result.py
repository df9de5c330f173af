# =============================================================================
# core/models/result.py - Operation Results
# =============================================================================
# Store operations never raise for expected failures. They return a Result
# holding either a value or a classified StoreError, and the caller decides
# how to surface it (the HTTP layer maps ErrorKind to a status code).
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """
    Classification of store failures.

    - bad_request: input is missing or malformed
    - not_found: the referenced id has no record
    - conflict: a uniqueness rule would be violated
    - internal: anything unexpected
    """
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class StoreError:
    """A classified failure with a human-readable message."""
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a success value or a StoreError.

    Example:
        result = store.get_by_id(3)
        if result.ok:
            print(result.value.name)
        else:
            print(result.error.kind, result.error.message)
    """
    value: T | None = None
    error: StoreError | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, message: str | None = None) -> "Result[T]":
        return cls(value=value, message=message)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=StoreError(kind=kind, message=message))
