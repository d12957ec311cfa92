"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings()
        assert settings.mongodb_uri == "mongodb://localhost:27017"
        assert settings.mongodb_database == "catalog"
        assert settings.mongodb_timeout_ms == 5000

    def test_default_collection_names(self):
        """Settings should default to the standard collection names."""
        settings = Settings()
        assert settings.users_collection == "users"
        assert settings.sessions_collection == "sessions"
        assert settings.comments_collection == "comments"

    def test_ignores_unknown_env(self):
        """Settings should ignore unrelated environment variables."""
        with patch.dict(os.environ, {"UNRELATED_FLAG": "true", "USERS_COLLECTION": "members"}):
            settings = Settings()
            assert settings.users_collection == "members"
            assert not hasattr(settings, "unrelated_flag")

    def test_loads_mongodb_config_from_env(self):
        """Settings should load MongoDB configuration from environment variables."""
        with patch.dict(os.environ, {
            "MONGODB_URI": "mongodb://db.internal:27017",
            "MONGODB_DATABASE": "catalog_prod",
            "MONGODB_TIMEOUT_MS": "1500",
        }):
            settings = Settings()
            assert settings.mongodb_uri == "mongodb://db.internal:27017"
            assert settings.mongodb_database == "catalog_prod"
            assert settings.mongodb_timeout_ms == 1500

    def test_env_is_case_insensitive(self):
        """Settings should accept lower-case environment variable names."""
        with patch.dict(os.environ, {"comments_collection": "reviews"}):
            settings = Settings()
            assert settings.comments_collection == "reviews"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance on repeated calls."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
