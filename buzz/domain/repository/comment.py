"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from buzz.domain.model.comment import Comment
from buzz.domain.value import CommentId, SubjectId


class CommentRepository(ABC):
    """Remote repository for the comments of a subject.

    Defines the contract the comment engine needs from the remote API.
    Implementations live in the adapter layer and raise
    CommentApiError on any failure.
    """

    @abstractmethod
    async def fetch_comments(self, subject_id: SubjectId) -> List[Comment]:
        """Fetch all top-level comments for a subject.

        Replies are nested under their parents by the server.

        Args:
            subject_id: The subject (post) ID

        Returns:
            Top-level comments in server order
        """
        pass

    @abstractmethod
    async def create_comment(
        self,
        subject_id: SubjectId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment or a reply.

        Args:
            subject_id: The subject (post) ID
            content: Trimmed comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The created comment with its server-assigned ID
        """
        pass

    @abstractmethod
    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete
        """
        pass
