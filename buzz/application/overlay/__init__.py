"""Comment overlay lifecycle."""

from .lifecycle import CommentOverlay
from .session import CommentSession
from .transition import TimedTransition, Transition

__all__ = ["CommentOverlay", "CommentSession", "TimedTransition", "Transition"]
