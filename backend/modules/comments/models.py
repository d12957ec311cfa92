"""
Comments module data models.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class Comment(BaseModel):
    """
    A user comment on a catalog entry.

    The id is assigned by the caller before insert (an ObjectId hex string).
    Ownership is the stored email: only that email may update or delete it.
    """

    id: Optional[str] = Field(None, description="ObjectId hex string")
    name: Optional[str] = Field(None, description="Commenter display name")
    email: Optional[str] = Field(None, description="Owner's email address")
    movie_id: Optional[str] = Field(None, description="Catalog entry reference")
    text: str = Field(default="", description="Comment body")
    date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation or last update time; None if never stored",
    )


class Critic(BaseModel):
    """
    A commenter and how many comments they wrote.

    Produced by the most-active-commenters aggregation only.
    """

    id: str = Field(..., alias="_id", description="Commenter email")
    count: int = Field(..., ge=0, description="Number of comments")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }
