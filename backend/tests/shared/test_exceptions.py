"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    PrismWorldsError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)


class TestPrismWorldsError:
    def test_prismworlds_error_message(self):
        """PrismWorldsError should store message."""
        error = PrismWorldsError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_prismworlds_error_default_code(self):
        """PrismWorldsError should default code to class name."""
        error = PrismWorldsError("Test error")
        assert error.code == "PrismWorldsError"

    def test_prismworlds_error_custom_code(self):
        """PrismWorldsError should accept custom code."""
        error = PrismWorldsError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_prismworlds_error_default_details(self):
        """PrismWorldsError should default details to empty dict."""
        error = PrismWorldsError("Test error")
        assert error.details == {}

    def test_prismworlds_error_custom_details(self):
        """PrismWorldsError should accept custom details."""
        error = PrismWorldsError("Test error", details={"key": "value"})
        assert error.details == {"key": "value"}

    def test_prismworlds_error_to_dict(self):
        """PrismWorldsError should convert to dict."""
        error = PrismWorldsError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_prismworlds_error_to_dict_minimal(self):
        """PrismWorldsError.to_dict should work with minimal args."""
        error = PrismWorldsError("Test error")
        result = error.to_dict()

        assert result["error"] == "PrismWorldsError"
        assert result["message"] == "Test error"
        assert result["details"] == {}


class TestNotFoundError:
    def test_not_found_error_inherits_prismworlds_error(self):
        """NotFoundError should inherit from PrismWorldsError."""
        error = NotFoundError("Resource not found")
        assert isinstance(error, PrismWorldsError)

    def test_not_found_error_default_code(self):
        """NotFoundError should default code to class name."""
        error = NotFoundError("Resource not found")
        assert error.code == "NotFoundError"


class TestValidationError:
    def test_validation_error_inherits_prismworlds_error(self):
        """ValidationError should inherit from PrismWorldsError."""
        error = ValidationError("Invalid input")
        assert isinstance(error, PrismWorldsError)

    def test_validation_error_with_details(self):
        """ValidationError should support field-level details."""
        error = ValidationError(
            "Validation failed",
            details={"fields": {"email": "Invalid format"}}
        )
        assert error.details["fields"]["email"] == "Invalid format"


class TestAuthenticationError:
    def test_authentication_error_inherits_prismworlds_error(self):
        """AuthenticationError should inherit from PrismWorldsError."""
        error = AuthenticationError("Invalid token")
        assert isinstance(error, PrismWorldsError)


class TestExternalServiceError:
    def test_external_service_error_inherits_prismworlds_error(self):
        """ExternalServiceError should inherit from PrismWorldsError."""
        error = ExternalServiceError("Connection failed", service="supabase")
        assert isinstance(error, PrismWorldsError)

    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="supabase")
        assert error.service == "supabase"

    def test_external_service_error_includes_service_in_details(self):
        """ExternalServiceError should include service in details."""
        error = ExternalServiceError("Connection failed", service="supabase")
        result = error.to_dict()

        assert result["details"]["service"] == "supabase"

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="supabase",
            details={"status_code": 500}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "supabase"
        assert result["details"]["status_code"] == 500


class TestValidationErrorField:
    def test_field_is_recorded_in_details(self):
        """ValidationError should report the offending field."""
        error = ValidationError("Passwords do not match", field="confirm_password")
        assert error.field == "confirm_password"
        assert error.to_dict()["details"]["field"] == "confirm_password"

    def test_field_is_optional(self):
        """ValidationError without a field keeps details empty."""
        error = ValidationError("Invalid input")
        assert error.field is None
        assert error.details == {}
