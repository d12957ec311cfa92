"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory MongoDB (mongomock) with the production indexes, store
instances bound to it, and helpers for building realistic records.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
import mongomock

from shared.config import get_settings
from shared.database import ensure_indexes
from modules.users.models import User
from modules.users.repository import UserAccountRepository, reset_user_account_store
from modules.comments.repository import CommentRepository, reset_comment_store


# Test JWT secret (only for minting session tokens in tests)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test@example.com",
    expired: bool = False,
) -> str:
    """
    Create a JWT like the ones the caller layer stores as sessions.

    Args:
        user_id: Subject to include in the token
        expired: If True, creates an expired token

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def create_test_user(
    email: str = "test@example.com",
    name: str = "Test User",
    preferences: dict = None,
) -> User:
    """Helper to create a user record."""
    return User(
        email=email,
        name=name,
        password="$2b$12$abcdefghijklmnopqrstuv",
        preferences=preferences if preferences is not None else {"favorite_cast": "Tom Hanks"},
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and store singletons before and after each test."""
    get_settings.cache_clear()
    reset_user_account_store()
    reset_comment_store()
    yield
    get_settings.cache_clear()
    reset_user_account_store()
    reset_comment_store()


@pytest.fixture
def mongo_db():
    """Provide an in-memory database with the production indexes."""
    client = mongomock.MongoClient()
    db = client["catalog_test"]
    ensure_indexes(db)
    yield db
    client.close()


@pytest.fixture
def user_store(mongo_db) -> UserAccountRepository:
    """Provide a user account store over the in-memory database."""
    return UserAccountRepository(mongo_db)


@pytest.fixture
def comment_store(mongo_db) -> CommentRepository:
    """Provide a comment store over the in-memory database."""
    return CommentRepository(mongo_db)


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def session_token(test_user_email: str) -> str:
    """Create a valid session token for testing."""
    return create_test_token(user_id=test_user_email)
