"""
Shared infrastructure for the catalog accounts core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory and index bootstrap
- exceptions: Base exception classes
- results: Discriminated outcomes for best-effort operations
- repository: Base repository over a MongoDB database

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_mongo_client,
    get_database,
    ensure_indexes,
    ping,
    reset_client_cache,
)
from .exceptions import (
    CatalogError,
    DuplicateEntityError,
    InvalidArgumentError,
    InvalidOperationError,
    StoreUnavailableError,
)
from .results import StoreOutcome

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "ensure_indexes",
    "ping",
    "reset_client_cache",
    "CatalogError",
    "DuplicateEntityError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "StoreUnavailableError",
    "StoreOutcome",
]
