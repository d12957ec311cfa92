"""
User account repository for document store access.

Encapsulates all MongoDB queries and data mapping for the account collections:
- users
- sessions

Uniqueness of users.email is enforced by the store's unique index (see
shared.database.ensure_indexes); the read-before-insert here only produces
a friendlier error in the common, non-racing case.
"""

import logging
from typing import Optional, Any

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from shared.config import get_settings
from shared.database import get_database, ensure_indexes
from shared.exceptions import StoreUnavailableError
from shared.repository import BaseRepository
from shared.results import StoreOutcome
from .exceptions import (
    UserAlreadyExistsError,
    InvalidEmailError,
    InvalidPreferencesError,
    InvalidSessionTokenError,
)
from .interfaces import IUserAccountStore
from .models import User, Session

logger = logging.getLogger(__name__)


class UserAccountRepository(BaseRepository[User], IUserAccountStore):
    """
    Repository for user accounts, sessions and preferences.

    Note: This repository does NOT validate credentials or tokens.
    The caller layer supplies identities derived from verified JWTs.
    """

    def __init__(self, db: Database) -> None:
        super().__init__(db)
        settings = get_settings()
        self._users = self._collection(settings.users_collection)
        self._sessions = self._collection(settings.sessions_collection)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def add_user(self, user: User) -> bool:
        """
        Insert a user into the users collection.

        Args:
            user: User to add.

        Returns:
            True if the user was inserted.

        Raises:
            InvalidEmailError: If the user has no email.
            UserAlreadyExistsError: If the email is already registered,
                including when a concurrent insert wins the unique index.
            StoreUnavailableError: On any other store failure.
        """
        if not user.email:
            raise InvalidEmailError()

        try:
            if self._users.find_one({"email": user.email}) is not None:
                raise UserAlreadyExistsError(user.email)
            self._users.insert_one(user.model_dump())
        except DuplicateKeyError as e:
            raise UserAlreadyExistsError(user.email) from e
        except PyMongoError as e:
            raise StoreUnavailableError(f"Couldn't add new user: {e}") from e

        logger.debug(f"Added user {user.email}")
        return True

    def get_user(self, email: str) -> Optional[User]:
        """
        Get a user by email.

        Args:
            email: Email to match exactly.

        Returns:
            User if found, None otherwise.
        """
        try:
            doc = self._users.find_one({"email": email})
        except PyMongoError as e:
            raise StoreUnavailableError(f"Couldn't load user: {e}") from e

        if doc is None:
            return None
        return self._map_to_user(doc)

    def delete_user(self, email: str) -> bool:
        """Delete a user and their sessions. See delete_user_outcome."""
        return self.delete_user_outcome(email).succeeded

    def delete_user_outcome(self, email: str) -> StoreOutcome:
        """
        Delete the user matching email, then their sessions.

        The session cleanup is a best-effort follow-up. If it fails the user
        stays deleted and the orphaned sessions are left for a later
        delete_user_sessions call.

        Args:
            email: Email of the user to delete.

        Returns:
            APPLIED if the user was removed, NOT_FOUND if no user matched,
            TRANSIENT_ERROR if the store failed.
        """
        try:
            result = self._users.delete_one({"email": email})
        except PyMongoError:
            logger.warning(f"Failed to delete user {email}", exc_info=True)
            return StoreOutcome.TRANSIENT_ERROR

        if result.deleted_count != 1:
            return StoreOutcome.NOT_FOUND

        try:
            self.delete_user_sessions(email)
        except StoreUnavailableError:
            logger.warning(
                f"Deleted user {email} but failed to delete their sessions",
                exc_info=True,
            )

        logger.debug(f"Deleted user {email}")
        return StoreOutcome.APPLIED

    def update_user_preferences(
        self,
        email: str,
        preferences: Optional[dict[str, Any]],
    ) -> bool:
        """
        Replace the preferences of the user identified by email.

        Args:
            email: Email of the user to update.
            preferences: New preferences. Replaces the stored value entirely.

        Returns:
            True if the store reports the record as modified. Writing the
            same preferences again may report False.

        Raises:
            InvalidPreferencesError: If preferences is None.
        """
        if preferences is None:
            raise InvalidPreferencesError(email)

        try:
            result = self._users.update_one(
                {"email": email},
                {"$set": {"preferences": preferences}},
            )
        except PyMongoError:
            logger.warning(f"Failed to update preferences for {email}", exc_info=True)
            return False

        return result.modified_count >= 1

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    def create_session(self, user_id: str, jwt: str) -> bool:
        """Create a session for jwt if none exists. See create_session_outcome."""
        return self.create_session_outcome(user_id, jwt).succeeded

    def create_session_outcome(self, user_id: str, jwt: str) -> StoreOutcome:
        """
        Create a session keyed by jwt, or keep the existing one.

        Issued as a single upsert so re-issuing a token is a no-op. Two
        concurrent first calls can still race to insert; a duplicate
        session for the same token is tolerated.

        Args:
            user_id: Owning user identifier.
            jwt: Token string.

        Returns:
            APPLIED if the session exists afterwards, TRANSIENT_ERROR if
            the store failed.

        Raises:
            InvalidSessionTokenError: If jwt is empty.
        """
        if not jwt:
            raise InvalidSessionTokenError()

        try:
            self._sessions.update_one(
                {"jwt": jwt},
                {"$setOnInsert": {"user_id": user_id}},
                upsert=True,
            )
        except PyMongoError:
            logger.warning(f"Failed to create session for {user_id}", exc_info=True)
            return StoreOutcome.TRANSIENT_ERROR

        return StoreOutcome.APPLIED

    def get_session(self, user_id: str) -> Optional[Session]:
        """
        Get the session of a user.

        Store failures are logged and reported as no session, so callers
        deny access conservatively.

        Args:
            user_id: Owning user identifier.

        Returns:
            Session if found, None otherwise.
        """
        try:
            doc = self._sessions.find_one({"user_id": user_id})
        except PyMongoError:
            logger.warning(f"Failed to load session for {user_id}", exc_info=True)
            return None

        if doc is None:
            return None
        return Session.model_validate(doc)

    def delete_user_sessions(self, user_id: str) -> bool:
        """
        Delete all sessions of a user.

        Args:
            user_id: Owning user identifier.

        Returns:
            True if at least one session was removed.
        """
        try:
            result = self._sessions.delete_many({"user_id": user_id})
        except PyMongoError as e:
            raise StoreUnavailableError(f"Couldn't delete sessions: {e}") from e

        return result.deleted_count >= 1

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_user(self, doc: dict[str, Any]) -> User:
        """Map a users document to a User model."""
        return User(
            email=doc["email"],
            name=doc.get("name", ""),
            password=doc.get("password", ""),
            preferences=doc.get("preferences") or {},
        )


# Module-level instance getter
_store_instance: Optional[UserAccountRepository] = None


def get_user_account_store() -> UserAccountRepository:
    """
    Get the user account store singleton.

    Builds the indexes on first use; add_user relies on the unique email
    index to reject the loser of a concurrent registration.
    """
    global _store_instance
    if _store_instance is None:
        db = get_database()
        ensure_indexes(db)
        _store_instance = UserAccountRepository(db)
    return _store_instance


def reset_user_account_store() -> None:
    """Reset the user account store singleton (for testing)."""
    global _store_instance
    _store_instance = None
