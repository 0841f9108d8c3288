"""Domain value objects for the comment overlay."""

from buzz.domain.value.identifiers import CommentId, SubjectId, UserId
from buzz.domain.value.result import OperationError, OperationResult
from buzz.domain.value.types import ErrorKind, OverlayPhase, Username, ViewSignal

__all__ = [
    # Identifiers
    "CommentId",
    "SubjectId",
    "UserId",
    # Types
    "ErrorKind",
    "OverlayPhase",
    "Username",
    "ViewSignal",
    # Results
    "OperationError",
    "OperationResult",
]
