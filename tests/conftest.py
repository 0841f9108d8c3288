"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from buzz.application.usecase.comment import CommentContext
from buzz.domain.model import Comment, UserSummary
from buzz.domain.service import CommentStore, ReplyTargetController, SignalBus
from buzz.domain.value import CommentId, SubjectId, UserId, ViewSignal

# Local-only telemetry for tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str | None = "alice", name: str | None = None) -> UserSummary:
    """Helper function to build a comment author for tests."""
    return UserSummary(
        id=UserId(f"user-{username or name or 'anon'}"),
        username=username,
        name=name or (username.title() if username else None),
    )


def make_comment(
    comment_id: str,
    content: str = "hi",
    username: str | None = "alice",
    parent_id: str | None = None,
    replies: list[Comment] | None = None,
    minutes_ago: int = 0,
) -> Comment:
    """Helper function to build comments for tests.

    Args:
        comment_id: Comment ID
        content: Comment text
        username: Author username
        parent_id: Parent comment ID for replies
        replies: Nested replies
        minutes_ago: Age of the comment, used for server ordering

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(comment_id),
        author=make_user(username),
        content=content,
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=datetime(2025, 1, 1, 12, 0, 0) - timedelta(minutes=minutes_ago),
        replies=replies or [],
    )


def make_context(
    subject_id: str = "P1", max_length: int = 500
) -> tuple[CommentContext, list[ViewSignal]]:
    """Helper function to build a fresh session context.

    Returns:
        The context and the list every emitted view signal is appended to
    """
    signals = SignalBus()
    received: list[ViewSignal] = []
    signals.subscribe(received.append)
    context = CommentContext(
        subject_id=SubjectId(subject_id),
        store=CommentStore(),
        reply_target=ReplyTargetController(signals, max_length),
        signals=signals,
    )
    return context, received
