"""Domain services."""

from .base import Service
from .comment_store import CommentStore
from .reply_target import ReplyTargetController
from .signals import SignalBus, SignalListener

__all__ = [
    "CommentStore",
    "ReplyTargetController",
    "Service",
    "SignalBus",
    "SignalListener",
]
