"""
Base exception classes for the catalog accounts core.

Each module should define its own exceptions that inherit from these bases.
Callers translate them into transport-level responses.
"""

from typing import Optional, Any


class CatalogError(Exception):
    """
    Raised by the account and comment stores.

    The code is a stable machine-readable name (defaulting to the class
    name) and details carries the offending keys, such as the email or
    comment id, so the caller layer can map failures without parsing text.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Describe the failure as plain data for the caller layer."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class DuplicateEntityError(CatalogError):
    """A uniqueness constraint was violated."""

    pass


class InvalidArgumentError(CatalogError):
    """Input was missing or malformed. Raised before any store call."""

    pass


class InvalidOperationError(CatalogError):
    """A store mutation was attempted and was rejected or failed."""

    pass


class StoreUnavailableError(CatalogError):
    """Transient I/O or connection failure talking to the document store."""

    def __init__(
        self,
        message: str,
        store: str = "mongodb",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.store = store
        self.details["store"] = store
