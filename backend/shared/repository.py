"""
Base repository class for document store access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB database access and the document-to-model mapping convention.
"""

from typing import TypeVar, Generic
from pymongo.collection import Collection
from pymongo.database import Database


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for store operations:
    - MongoDB database access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle document-to-Pydantic model mapping internally.

    Example:
        class CommentRepository(BaseRepository[Comment]):
            def get_comment(self, comment_id: str) -> Optional[Comment]:
                doc = self._collection("comments").find_one({"_id": ObjectId(comment_id)})
                if doc is None:
                    return None
                return self._map_to_comment(doc)
    """

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a MongoDB database handle.

        Args:
            db: pymongo Database instance for store operations.
        """
        self._db = db

    def _collection(self, name: str) -> Collection:
        """Resolve a collection by name on the bound database."""
        return self._db[name]
