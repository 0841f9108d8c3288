"""Strongly typed identifiers for comment thread entities.

Identifiers are opaque strings assigned by the remote API. NewType keeps
a comment id from being passed where a subject id is expected.
"""

from typing import NewType

CommentId = NewType("CommentId", str)
SubjectId = NewType("SubjectId", str)
UserId = NewType("UserId", str)
