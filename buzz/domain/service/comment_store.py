"""Comment store for one overlay session."""

from typing import Iterable, Iterator, Optional

import logfire

from buzz.domain.model.comment import Comment
from buzz.domain.value import CommentId

from .base import Service


class CommentStore(Service):
    """Ordered list of top-level comments for one subject.

    The store never holds two entries with the same ID. Order is whatever
    the source provided; prepend puts the user's own new comment first.
    """

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    @property
    def comments(self) -> tuple[Comment, ...]:
        """Snapshot of the held comments in display order."""
        return tuple(self._comments)

    def __len__(self) -> int:
        return len(self._comments)

    def __iter__(self) -> Iterator[Comment]:
        return iter(tuple(self._comments))

    def __contains__(self, comment_id: object) -> bool:
        return any(c.id == comment_id for c in self._comments)

    def get(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a held top-level comment by ID."""
        return next((c for c in self._comments if c.id == comment_id), None)

    def load(self, comments: Iterable[Comment]) -> None:
        """Replace the entire collection.

        Args:
            comments: Comments in source order; the first occurrence of a
                repeated ID wins
        """
        seen: set[CommentId] = set()
        loaded: list[Comment] = []
        for comment in comments:
            if comment.id in seen:
                logfire.warn("Duplicate comment in load", comment_id=comment.id)
                continue
            seen.add(comment.id)
            loaded.append(comment)
        self._comments = loaded

    def prepend(self, comment: Comment) -> None:
        """Insert a comment at the front.

        An entry already held under the same ID is dropped first.
        """
        self._comments = [comment] + [
            c for c in self._comments if c.id != comment.id
        ]

    def remove_by_id(self, comment_id: CommentId) -> bool:
        """Remove a comment by ID.

        Top-level entries are removed outright; a nested reply is pruned
        from its parent. Absent IDs are a no-op.

        Returns:
            True if something was removed
        """
        remaining = [c for c in self._comments if c.id != comment_id]
        if len(remaining) != len(self._comments):
            self._comments = remaining
            return True

        for index, comment in enumerate(self._comments):
            pruned = comment.without_reply(comment_id)
            if pruned is not None:
                self._comments[index] = pruned
                return True

        return False
