"""Explicit result type returned at the pipeline boundary.

Pipelines never raise collaborator or validation errors to their caller;
they return an OperationResult that is either a value or an error.
"""

from typing import Generic, Optional, TypeVar

from buzz.domain.value.common import ValueObject
from buzz.domain.value.types import ErrorKind

T = TypeVar("T")


class OperationError(ValueObject):
    """Failure details suitable for a transient, dismissible notice."""

    kind: ErrorKind
    message: str


class OperationResult(ValueObject, Generic[T]):
    """Outcome of a pipeline operation.

    Attributes:
        value: Operation value on success (may be None for unit results)
        error: Failure details, None on success
        discarded: True when the operation completed after its session
            was torn down and its effect was dropped
    """

    value: Optional[T] = None
    error: Optional[OperationError] = None
    discarded: bool = False

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None

    @classmethod
    def success(
        cls, value: Optional[T] = None, discarded: bool = False
    ) -> "OperationResult[T]":
        return cls(value=value, discarded=discarded)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "OperationResult[T]":
        return cls(error=OperationError(kind=kind, message=message))
