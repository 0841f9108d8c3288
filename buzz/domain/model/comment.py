"""Comment entity.

Comments belong to a subject (a post). Top-level comments have no parent;
replies reference their parent and are nested by the server under it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from buzz.domain.model.common import DomainModel
from buzz.domain.model.user import UserSummary
from buzz.domain.value import CommentId

MAX_CONTENT_LENGTH = 500


class Comment(DomainModel):
    """Comment entity.

    The engine never writes like_count or liked_by_current_user; they are
    carried for display only.

    Threading is owned by the server:
    - parent_id: Direct parent comment (None for top-level)
    - replies: Nested replies in the order the server returned them
    """

    id: CommentId
    author: UserSummary
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    like_count: int = Field(default=0, ge=0)
    liked_by_current_user: bool = False
    replies: list["Comment"] = Field(default_factory=list)

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.parent_id is not None

    def without_reply(self, comment_id: CommentId) -> Optional["Comment"]:
        """Return a copy with the given nested reply pruned.

        Returns:
            Updated comment, or None if no reply with that ID is nested here
        """
        changed = False
        replies: list[Comment] = []
        for reply in self.replies:
            if reply.id == comment_id:
                changed = True
                continue
            pruned = reply.without_reply(comment_id)
            if pruned is not None:
                changed = True
                replies.append(pruned)
            else:
                replies.append(reply)

        if not changed:
            return None
        return self.revised(replies=replies)
