"""
Comments module interface.

The caller layer depends on ICommentStore for all comment operations.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Comment, Critic


@runtime_checkable
class ICommentStore(Protocol):
    """
    Interface for comment persistence and the commenter report.

    Ownership is checked by comparing the stored email with the email the
    caller derived from the verified token.
    """

    def get_comment(self, comment_id: str) -> Optional[Comment]:
        """
        Get a comment by id.

        Returns:
            Comment if found, None otherwise

        Raises:
            InvalidArgumentError: If comment_id is empty or malformed
        """
        ...

    def add_comment(self, comment: Comment) -> Comment:
        """
        Insert a comment with a caller-assigned id.

        Returns:
            The inserted comment

        Raises:
            InvalidOperationError: If the id is missing or the insert fails
        """
        ...

    def update_comment(self, comment_id: str, text: str, email: str) -> bool:
        """
        Replace the text of a comment owned by email.

        Returns:
            True only if exactly one comment was modified. Never raises.
        """
        ...

    def delete_comment(self, comment_id: str, email: str) -> bool:
        """
        Delete a comment owned by email.

        Returns:
            True only if exactly one comment was removed

        Raises:
            InvalidArgumentError: If comment_id is empty or malformed
        """
        ...

    def most_active_commenters(self) -> list[Critic]:
        """
        Rank commenters by number of comments.

        Returns:
            Up to 20 critics, highest count first
        """
        ...
