"""
User accounts module data models.

These models define the records stored in the users and sessions
collections and exposed to callers through the interface.
"""

from typing import Any
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A registered user account.

    The email is the identity key: at most one User exists per email.
    The password is stored exactly as given; hashing happens upstream.
    """

    email: str = Field(..., description="User's email address (identity key)")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="Hashed password")
    preferences: dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form user preferences",
    )

    model_config = {"extra": "ignore"}  # Stored documents carry _id


class Session(BaseModel):
    """
    An authentication session bound to a user.

    A session is identified by its jwt value; issuing the same token twice
    yields a single session.
    """

    user_id: str = Field(..., description="Owning user (email or id)")
    jwt: str = Field(..., description="Issued JWT token string")

    model_config = {"extra": "ignore"}
