"""Comment API adapter."""

from .client import HttpCommentRepository
from .inmemory import InMemoryCommentRepository

__all__ = ["HttpCommentRepository", "InMemoryCommentRepository"]
