"""In-memory comment repository for testing and local runs.

Behaves like the remote API: assigns IDs, nests replies under their
parents on fetch and returns top-level comments newest first.
"""

import asyncio
import itertools
from datetime import datetime
from typing import Iterable, Literal, Optional
from uuid import uuid4

from buzz.adapter.error import CommentApiError
from buzz.domain.model import Comment, UserSummary
from buzz.domain.repository import CommentRepository
from buzz.domain.value import CommentId, SubjectId, UserId

Operation = Literal["fetch", "create", "delete"]


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Tests can inject a failure into the next call of an operation and can
    pause an operation to observe state while a call is in flight.

    Attributes:
        calls: Log of (operation, argument) pairs in call order
    """

    def __init__(self, current_user: Optional[UserSummary] = None) -> None:
        self.current_user = current_user or UserSummary(
            id=UserId("me"), username="me", name="Me"
        )
        self.calls: list[tuple[Operation, str]] = []
        self._subjects: dict[CommentId, SubjectId] = {}
        self._comments: dict[CommentId, Comment] = {}
        self._order: dict[CommentId, int] = {}
        self._sequence = itertools.count()
        self._failures: dict[Operation, str] = {}
        self._gates: dict[Operation, asyncio.Event] = {}

    def seed(self, subject_id: SubjectId, comments: Iterable[Comment]) -> None:
        """Store existing comments for a subject (nested replies included)."""
        for comment in comments:
            self._store(subject_id, comment.revised(replies=[]))
            self.seed(subject_id, comment.replies)

    def fail_next(self, operation: Operation, message: str = "Server error") -> None:
        """Make the next call of an operation raise CommentApiError."""
        self._failures[operation] = message

    def pause(self, operation: Operation) -> None:
        """Hold calls of an operation in flight until resume() is called."""
        self._gates[operation] = asyncio.Event()

    def resume(self, operation: Operation) -> None:
        """Release calls held by pause()."""
        gate = self._gates.pop(operation, None)
        if gate is not None:
            gate.set()

    def _store(self, subject_id: SubjectId, comment: Comment) -> None:
        self._subjects[comment.id] = subject_id
        self._comments[comment.id] = comment
        self._order[comment.id] = next(self._sequence)

    async def _enter(self, operation: Operation, argument: str) -> None:
        self.calls.append((operation, argument))
        gate = self._gates.get(operation)
        if gate is not None:
            await gate.wait()
        message = self._failures.pop(operation, None)
        if message is not None:
            raise CommentApiError(message, status_code=500)

    def _thread(self, parent_id: Optional[CommentId], subject_id: SubjectId) -> list[Comment]:
        """Build the nested thread below a parent (None for top-level)."""
        children = [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and self._subjects[c.id] == subject_id
        ]
        # Top-level newest first, replies in conversation order
        children.sort(
            key=lambda c: (c.created_at, self._order[c.id]), reverse=parent_id is None
        )
        return [
            c.revised(replies=self._thread(c.id, subject_id))
            for c in children
        ]

    async def fetch_comments(self, subject_id: SubjectId) -> list[Comment]:
        """Fetch top-level comments with replies nested."""
        await self._enter("fetch", subject_id)
        return self._thread(None, subject_id)

    async def create_comment(
        self,
        subject_id: SubjectId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment authored by current_user."""
        await self._enter("create", subject_id)
        if parent_id is not None and parent_id not in self._comments:
            raise CommentApiError("Parent comment not found", status_code=404)

        comment = Comment(
            id=CommentId(uuid4().hex),
            author=self.current_user,
            content=content,
            parent_id=parent_id,
            created_at=datetime.now(),
        )
        self._store(subject_id, comment)
        return comment

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and its replies."""
        await self._enter("delete", comment_id)
        if comment_id not in self._comments:
            raise CommentApiError("Comment not found", status_code=404)

        doomed = [comment_id]
        while doomed:
            current = doomed.pop()
            self._comments.pop(current, None)
            self._subjects.pop(current, None)
            self._order.pop(current, None)
            doomed.extend(c.id for c in self._comments.values() if c.parent_id == current)
