"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    CatalogError,
    DuplicateEntityError,
    InvalidArgumentError,
    InvalidOperationError,
    StoreUnavailableError,
)


class TestCatalogError:
    def test_catalog_error_message(self):
        """CatalogError should store message."""
        error = CatalogError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_catalog_error_default_code(self):
        """CatalogError should default code to class name."""
        error = CatalogError("Test error")
        assert error.code == "CatalogError"

    def test_catalog_error_custom_code(self):
        """CatalogError should accept custom code."""
        error = CatalogError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_catalog_error_default_details(self):
        """CatalogError should default details to empty dict."""
        error = CatalogError("Test error")
        assert error.details == {}

    def test_catalog_error_to_dict(self):
        """CatalogError should convert to dict."""
        error = CatalogError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestTaxonomy:
    @pytest.mark.parametrize("cls", [
        DuplicateEntityError,
        InvalidArgumentError,
        InvalidOperationError,
    ])
    def test_inherits_catalog_error(self, cls):
        """Every taxonomy error should be a CatalogError."""
        error = cls("boom")
        assert isinstance(error, CatalogError)
        assert error.code == cls.__name__

    def test_taxonomy_errors_are_distinct(self):
        """Validation errors should not be caught as store failures."""
        assert not issubclass(InvalidArgumentError, InvalidOperationError)
        assert not issubclass(DuplicateEntityError, StoreUnavailableError)


class TestStoreUnavailableError:
    def test_store_unavailable_defaults_store(self):
        """StoreUnavailableError should record the store name."""
        error = StoreUnavailableError("Connection refused")
        assert isinstance(error, CatalogError)
        assert error.store == "mongodb"
        assert error.details["store"] == "mongodb"

    def test_store_unavailable_preserves_details(self):
        """StoreUnavailableError should merge store into given details."""
        error = StoreUnavailableError(
            "Timed out",
            store="replica-1",
            details={"operation": "find"},
        )
        assert error.details == {"operation": "find", "store": "replica-1"}
