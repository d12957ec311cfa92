"""Tests for comments module models."""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from modules.comments.models import Comment, Critic


class TestComment:
    def test_comment_defaults(self):
        """Comment should default optional fields and stamp a date."""
        before = datetime.now(timezone.utc)
        comment = Comment()

        assert comment.id is None
        assert comment.email is None
        assert comment.text == ""
        assert comment.date >= before

    def test_comment_fields(self):
        """Comment should hold the stored fields."""
        date = datetime(2024, 5, 1, tzinfo=timezone.utc)
        comment = Comment(
            id="65f0c0ffee0000000000abcd",
            name="Ned Stark",
            email="sean_bean@gameofthron.es",
            movie_id="573a1390f29313caabcd4135",
            text="Winter is coming.",
            date=date,
        )
        assert comment.email == "sean_bean@gameofthron.es"
        assert comment.date == date


class TestCritic:
    def test_critic_from_aggregation_document(self):
        """Critic should read its id from the _id key."""
        critic = Critic.model_validate({"_id": "a@example.com", "count": 3})
        assert critic.id == "a@example.com"
        assert critic.count == 3

    def test_critic_by_field_name(self):
        """Critic should also accept id by name."""
        critic = Critic(id="a@example.com", count=1)
        assert critic.id == "a@example.com"

    def test_critic_is_frozen(self):
        """Critic should be read-only."""
        critic = Critic(id="a@example.com", count=1)
        with pytest.raises(ValidationError):
            critic.count = 2

    def test_critic_rejects_negative_count(self):
        """Critic count should not be negative."""
        with pytest.raises(ValidationError):
            Critic(id="a@example.com", count=-1)
