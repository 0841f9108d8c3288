"""Comment use cases."""

from .context import CommentContext
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResult,
    DeleteCommentUseCase,
)
from .fetch_comments import FetchCommentsResult, FetchCommentsUseCase
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResult,
    SubmitCommentUseCase,
)

__all__ = [
    "CommentContext",
    "DeleteCommentRequest",
    "DeleteCommentResult",
    "DeleteCommentUseCase",
    "FetchCommentsResult",
    "FetchCommentsUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResult",
    "SubmitCommentUseCase",
]
