"""
Comment repository for document store access.

Encapsulates all MongoDB queries and data mapping for the comments
collection, including the commenter ranking aggregation.

Ownership is never a managed relation: a comment belongs to whoever's
email is stored on it, and every mutation compares that field explicitly.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Any

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import PyMongoError

from shared.config import get_settings
from shared.database import get_database, ensure_indexes
from shared.exceptions import InvalidArgumentError, StoreUnavailableError
from shared.repository import BaseRepository
from shared.results import StoreOutcome
from .exceptions import InvalidCommentIdError, CommentInsertError
from .interfaces import ICommentStore
from .models import Comment, Critic

logger = logging.getLogger(__name__)

# Size of the most active commenters report
MOST_ACTIVE_LIMIT = 20


class CommentRepository(BaseRepository[Comment], ICommentStore):
    """
    Repository for comments.

    Malformed ids are rejected with InvalidCommentIdError; a well-formed id
    that matches nothing reads as absent.
    """

    def __init__(self, db: Database) -> None:
        super().__init__(db)
        self._settings = get_settings()
        self._comments = self._collection(self._settings.comments_collection)

    # -------------------------------------------------------------------------
    # Reads and inserts
    # -------------------------------------------------------------------------

    def get_comment(self, comment_id: str) -> Optional[Comment]:
        """
        Get the comment matching an id.

        Args:
            comment_id: ObjectId hex string.

        Returns:
            Comment if found, None otherwise.

        Raises:
            InvalidCommentIdError: If comment_id is empty or malformed.
            StoreUnavailableError: If the store cannot be reached.
        """
        oid = self._to_object_id(comment_id)
        try:
            doc = self._comments.find_one({"_id": oid})
        except PyMongoError as e:
            raise StoreUnavailableError(f"Couldn't load comment: {e}") from e

        if doc is None:
            return None
        return self._map_to_comment(doc)

    def add_comment(self, comment: Comment) -> Comment:
        """
        Insert a comment. Single attempt, no retry.

        Args:
            comment: Comment with a caller-assigned id.

        Returns:
            The inserted comment.

        Raises:
            CommentInsertError: If the id is missing or malformed, or the
                store rejects the insert (duplicate id, I/O error).
        """
        if comment.id is None:
            raise CommentInsertError("id not set")
        if not ObjectId.is_valid(comment.id):
            raise CommentInsertError("malformed id", comment.id)

        try:
            self._comments.insert_one(self._map_to_document(comment))
        except PyMongoError as e:
            raise CommentInsertError(str(e), comment.id) from e

        logger.debug(f"Added comment {comment.id} by {comment.email}")
        return comment

    # -------------------------------------------------------------------------
    # Owner-gated mutations
    # -------------------------------------------------------------------------

    def update_comment(self, comment_id: str, text: str, email: str) -> bool:
        """Update a comment owned by email. See update_comment_outcome."""
        try:
            return self.update_comment_outcome(comment_id, text, email).succeeded
        except InvalidArgumentError:
            logger.debug(f"Rejected update for malformed comment id {comment_id!r}")
            return False

    def update_comment_outcome(self, comment_id: str, text: str, email: str) -> StoreOutcome:
        """
        Set the text of a comment, provided email owns it.

        Stamps the comment date with the current time and re-asserts the
        owner email in the same atomic update.

        Args:
            comment_id: ObjectId hex string.
            text: New comment text.
            email: Email of the user requesting the change.

        Returns:
            APPLIED if exactly one comment was modified, NOT_FOUND if the
            comment is absent, DENIED if email does not own it,
            TRANSIENT_ERROR if the store failed.

        Raises:
            InvalidCommentIdError: If comment_id is empty or malformed.
        """
        oid = self._to_object_id(comment_id)
        try:
            outcome = self._check_owner(oid, email)
            if outcome is not StoreOutcome.APPLIED:
                return outcome

            result = self._comments.update_one(
                {"_id": oid, "email": email},
                {"$set": {
                    "text": text,
                    "date": datetime.now(timezone.utc),
                    "email": email,
                }},
            )
        except PyMongoError:
            logger.warning(f"Failed to update comment {comment_id}", exc_info=True)
            return StoreOutcome.TRANSIENT_ERROR

        if result.modified_count != 1:
            return StoreOutcome.NOT_FOUND
        return StoreOutcome.APPLIED

    def delete_comment(self, comment_id: str, email: str) -> bool:
        """Delete a comment owned by email. See delete_comment_outcome."""
        return self.delete_comment_outcome(comment_id, email).succeeded

    def delete_comment_outcome(self, comment_id: str, email: str) -> StoreOutcome:
        """
        Delete a comment, provided email owns it.

        Args:
            comment_id: ObjectId hex string.
            email: Email of the user requesting the deletion.

        Returns:
            APPLIED if exactly one comment was removed, NOT_FOUND if the
            comment is absent, DENIED if email does not own it,
            TRANSIENT_ERROR if the store failed.

        Raises:
            InvalidCommentIdError: If comment_id is empty or malformed.
        """
        oid = self._to_object_id(comment_id)
        try:
            outcome = self._check_owner(oid, email)
            if outcome is not StoreOutcome.APPLIED:
                return outcome

            result = self._comments.delete_one({"_id": oid, "email": email})
        except PyMongoError:
            logger.warning(f"Failed to delete comment {comment_id}", exc_info=True)
            return StoreOutcome.TRANSIENT_ERROR

        if result.deleted_count != 1:
            return StoreOutcome.NOT_FOUND
        return StoreOutcome.APPLIED

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def most_active_commenters(self) -> list[Critic]:
        """
        List the users who comment the most.

        Joins comments to users by email, so comments whose email matches no
        user are not counted. Ties on count are ordered by email ascending.

        Returns:
            Up to MOST_ACTIVE_LIMIT critics, highest count first.
        """
        pipeline = [
            {"$lookup": {
                "from": self._settings.users_collection,
                "localField": "email",
                "foreignField": "email",
                "as": "users",
            }},
            {"$unwind": "$users"},
            {"$group": {"_id": "$users.email", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
            {"$project": {"_id": 1, "count": 1}},
            {"$limit": MOST_ACTIVE_LIMIT},
        ]

        try:
            docs = list(self._comments.aggregate(pipeline))
        except PyMongoError as e:
            raise StoreUnavailableError(f"Couldn't rank commenters: {e}") from e

        return [Critic.model_validate(doc) for doc in docs]

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _check_owner(self, oid: ObjectId, email: str) -> StoreOutcome:
        """Compare the stored owner of a comment with email."""
        doc = self._comments.find_one({"_id": oid}, {"email": 1})
        if doc is None:
            return StoreOutcome.NOT_FOUND

        owner = doc.get("email")
        if owner is None or owner != email:
            return StoreOutcome.DENIED
        return StoreOutcome.APPLIED

    def _to_object_id(self, comment_id: str) -> ObjectId:
        """Validate a comment id and convert it to an ObjectId."""
        if not comment_id or not ObjectId.is_valid(comment_id):
            raise InvalidCommentIdError(comment_id)
        return ObjectId(comment_id)

    def _map_to_document(self, comment: Comment) -> dict[str, Any]:
        """Map a Comment model to a comments document."""
        return {
            "_id": ObjectId(comment.id),
            "name": comment.name,
            "email": comment.email,
            "movie_id": comment.movie_id,
            "text": comment.text,
            "date": comment.date,
        }

    def _map_to_comment(self, doc: dict[str, Any]) -> Comment:
        """Map a comments document to a Comment model."""
        return Comment(
            id=str(doc["_id"]),
            name=doc.get("name"),
            email=doc.get("email"),
            movie_id=str(doc["movie_id"]) if doc.get("movie_id") is not None else None,
            text=doc.get("text", ""),
            date=doc.get("date"),
        )


# Module-level instance getter
_store_instance: Optional[CommentRepository] = None


def get_comment_store() -> CommentRepository:
    """Get the comment store singleton, building the indexes on first use."""
    global _store_instance
    if _store_instance is None:
        db = get_database()
        ensure_indexes(db)
        _store_instance = CommentRepository(db)
    return _store_instance


def reset_comment_store() -> None:
    """Reset the comment store singleton (for testing)."""
    global _store_instance
    _store_instance = None
