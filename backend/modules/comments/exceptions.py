"""
Comments module exceptions.
"""

from typing import Optional

from shared.exceptions import InvalidArgumentError, InvalidOperationError


class InvalidCommentIdError(InvalidArgumentError):
    """Raised when a comment id is empty or not a valid ObjectId."""

    def __init__(self, comment_id: Optional[str]):
        reason = "can't be null or empty" if not comment_id else "is malformed"
        super().__init__(
            f"Comment id {reason}: {comment_id!r}",
            code="INVALID_COMMENT_ID",
            details={"comment_id": comment_id},
        )


class CommentInsertError(InvalidOperationError):
    """Raised when a comment cannot be inserted."""

    def __init__(self, reason: str, comment_id: Optional[str] = None):
        super().__init__(
            f"Couldn't insert comment: {reason}",
            code="COMMENT_INSERT_FAILED",
            details={"comment_id": comment_id},
        )
