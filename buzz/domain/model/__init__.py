"""Domain model entities for the comment overlay."""

from buzz.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from buzz.domain.model.user import UserSummary

__all__ = [
    "Comment",
    "UserSummary",
    "MAX_CONTENT_LENGTH",
]
