"""User summary attached to comments.

Owned by the remote API; the comment engine only reads it.
"""

from typing import Optional

from buzz.domain.model.common import DomainModel
from buzz.domain.value import UserId


class UserSummary(DomainModel):
    """Author information embedded in a comment."""

    id: UserId
    username: Optional[str] = None
    name: Optional[str] = None
    avatar: Optional[str] = None  # Avatar reference, resolved by the view layer

    @property
    def display_name(self) -> str:
        """Username if present, otherwise the display name."""
        return self.username or self.name or ""
