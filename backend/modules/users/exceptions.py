"""
User accounts module exceptions.
"""

from shared.exceptions import DuplicateEntityError, InvalidArgumentError


class UserAlreadyExistsError(DuplicateEntityError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            f"User already exists: {email}",
            code="USER_ALREADY_EXISTS",
            details={"email": email},
        )


class InvalidEmailError(InvalidArgumentError):
    """Raised when a user record is missing its email."""

    def __init__(self, message: str = "User email can't be empty"):
        super().__init__(message, code="INVALID_EMAIL")


class InvalidPreferencesError(InvalidArgumentError):
    """Raised when preferences are absent on an update."""

    def __init__(self, email: str):
        super().__init__(
            f"Preferences can't be null for user: {email}",
            code="INVALID_PREFERENCES",
            details={"email": email},
        )


class InvalidSessionTokenError(InvalidArgumentError):
    """Raised when a session is requested without a token."""

    def __init__(self, message: str = "Session token can't be empty"):
        super().__init__(message, code="INVALID_SESSION_TOKEN")
