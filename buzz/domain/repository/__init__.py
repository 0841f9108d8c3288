"""Repository interfaces for the comment overlay.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter layer.
"""

from buzz.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
