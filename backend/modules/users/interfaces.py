"""
User accounts module interface.

Other layers should depend on IUserAccountStore, not the concrete repository.
This enables testing with mocks and swapping the store backend.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import User, Session


@runtime_checkable
class IUserAccountStore(Protocol):
    """
    Interface for user account, session and preference persistence.

    This protocol defines the contract that the users module exposes
    to the caller layer. Implementations must provide all these methods.
    """

    def add_user(self, user: User) -> bool:
        """
        Register a new user.

        Args:
            user: Fully populated user with a non-empty email

        Returns:
            True once the record is persisted

        Raises:
            InvalidArgumentError: If the email is empty
            DuplicateEntityError: If a user with that email exists
            StoreUnavailableError: If the store cannot be reached
        """
        ...

    def create_session(self, user_id: str, jwt: str) -> bool:
        """
        Record a session for a token, idempotently.

        Args:
            user_id: Owning user identifier
            jwt: Issued token

        Returns:
            True if the session exists after the call, False if it could
            not be confirmed (callers should retry or deny access)
        """
        ...

    def get_user(self, email: str) -> Optional[User]:
        """
        Get a user by email.

        Returns:
            User if found, None otherwise
        """
        ...

    def get_session(self, user_id: str) -> Optional[Session]:
        """
        Get a session by owning user.

        Returns:
            Session if found, None otherwise
        """
        ...

    def delete_user_sessions(self, user_id: str) -> bool:
        """
        Delete every session of a user.

        Returns:
            True if at least one session was removed
        """
        ...

    def delete_user(self, email: str) -> bool:
        """
        Delete a user and, best-effort, their sessions.

        Returns:
            True if the user record was removed
        """
        ...

    def update_user_preferences(self, email: str, preferences: Optional[dict[str, Any]]) -> bool:
        """
        Replace a user's preferences.

        Args:
            email: User to update
            preferences: New preferences, replacing the old value entirely

        Returns:
            True if the stored record was modified

        Raises:
            InvalidArgumentError: If preferences is None
        """
        ...
