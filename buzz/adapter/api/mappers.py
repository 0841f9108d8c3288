"""Mappers from comment API payloads to domain models.

The API uses camelCase keys and Mongo-style "_id" identifiers; domain models
are immutable Pydantic models, so mapping is done by hand.
"""

from typing import Any, Dict

from pydantic import ValidationError

from buzz.adapter.error import PayloadMappingError
from buzz.domain.model import Comment, UserSummary
from buzz.domain.value import CommentId, UserId


def _identifier(data: Dict[str, Any]) -> str:
    """Read "_id", falling back to "id"."""
    value = data.get("_id", data.get("id"))
    if value is None:
        raise PayloadMappingError(f"Payload has no identifier: {sorted(data)}")
    return str(value)


def payload_to_user(data: Dict[str, Any]) -> UserSummary:
    """Convert a user payload to a UserSummary.

    Args:
        data: User object from the API

    Returns:
        UserSummary domain model
    """
    return UserSummary(
        id=UserId(_identifier(data)),
        username=data.get("username"),
        name=data.get("name"),
        avatar=data.get("avatar"),
    )


def payload_to_comment(data: Dict[str, Any]) -> Comment:
    """Convert a comment payload to a Comment domain model.

    Nested replies are mapped recursively. A "likes" list is counted when
    the API omits "likesCount".

    Args:
        data: Comment object from the API

    Returns:
        Comment domain model

    Raises:
        PayloadMappingError: If the payload is missing fields or invalid
    """
    try:
        parent = data.get("parentId", data.get("parentComment"))
        if isinstance(parent, dict):
            parent = _identifier(parent)

        like_count = data.get("likesCount")
        if like_count is None:
            like_count = len(data.get("likes") or [])

        fields: Dict[str, Any] = {
            "id": CommentId(_identifier(data)),
            "author": payload_to_user(data["user"]),
            "content": data["content"],
            "parent_id": CommentId(str(parent)) if parent else None,
            "like_count": like_count,
            "liked_by_current_user": bool(data.get("isLiked", False)),
            "replies": [payload_to_comment(r) for r in data.get("replies") or []],
        }
        if data.get("createdAt") is not None:
            fields["created_at"] = data["createdAt"]

        return Comment(**fields)
    except KeyError as e:
        raise PayloadMappingError(f"Comment payload missing field: {e}") from e
    except (AttributeError, TypeError, ValidationError) as e:
        raise PayloadMappingError(f"Invalid comment payload: {e}") from e

