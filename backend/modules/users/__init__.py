"""
User accounts module.

Handles user registration, authentication sessions and preferences.

Public API:
- IUserAccountStore: Interface for account persistence
- User, Session: Stored records
- UserAccountRepository: MongoDB implementation
- Account exceptions: UserAlreadyExistsError, InvalidPreferencesError, etc.
"""

from .interfaces import IUserAccountStore
from .models import User, Session
from .repository import (
    UserAccountRepository,
    get_user_account_store,
    reset_user_account_store,
)
from .exceptions import (
    UserAlreadyExistsError,
    InvalidEmailError,
    InvalidPreferencesError,
    InvalidSessionTokenError,
)

__all__ = [
    # Interface
    "IUserAccountStore",
    # Models
    "User",
    "Session",
    # Implementation
    "UserAccountRepository",
    "get_user_account_store",
    "reset_user_account_store",
    # Exceptions
    "UserAlreadyExistsError",
    "InvalidEmailError",
    "InvalidPreferencesError",
    "InvalidSessionTokenError",
]
