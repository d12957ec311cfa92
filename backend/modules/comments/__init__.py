"""
Comments module.

Handles comment persistence, owner-checked edits and deletions, and the
most active commenters report.

Public API:
- ICommentStore: Interface for comment persistence
- Comment, Critic: Stored and derived records
- CommentRepository: MongoDB implementation
- Comment exceptions: InvalidCommentIdError, CommentInsertError
"""

from .interfaces import ICommentStore
from .models import Comment, Critic
from .repository import (
    CommentRepository,
    MOST_ACTIVE_LIMIT,
    get_comment_store,
    reset_comment_store,
)
from .exceptions import InvalidCommentIdError, CommentInsertError

__all__ = [
    # Interface
    "ICommentStore",
    # Models
    "Comment",
    "Critic",
    # Implementation
    "CommentRepository",
    "MOST_ACTIVE_LIMIT",
    "get_comment_store",
    "reset_comment_store",
    # Exceptions
    "InvalidCommentIdError",
    "CommentInsertError",
]
