"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    AppError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ExternalServiceError,
)


class TestAppError:
    def test_app_error_message(self):
        """AppError should store message."""
        error = AppError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_app_error_default_code(self):
        """AppError should default code to class name."""
        error = AppError("Test error")
        assert error.code == "AppError"

    def test_app_error_custom_code(self):
        error = AppError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_app_error_default_details(self):
        error = AppError("Test error")
        assert error.details == {}

    def test_app_error_to_dict(self):
        """AppError should convert to dict."""
        error = AppError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_app_error_is_server_error(self):
        assert AppError.status_code == 500


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error_class, status_code",
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (ConflictError, 409),
            (AuthenticationError, 401),
        ],
    )
    def test_subclass_status_code(self, error_class, status_code):
        error = error_class("failed")
        assert isinstance(error, AppError)
        assert error.status_code == status_code

    def test_validation_error_with_details(self):
        """ValidationError should support field-level details."""
        error = ValidationError(
            "Validation failed",
            details={"fields": {"email": "Invalid format"}}
        )
        assert error.details["fields"]["email"] == "Invalid format"


class TestExternalServiceError:
    def test_external_service_error_is_unavailable(self):
        error = ExternalServiceError("Connection failed", service="mongodb")
        assert isinstance(error, AppError)
        assert error.status_code == 503

    def test_external_service_error_stores_service(self):
        error = ExternalServiceError("Connection failed", service="mongodb")
        assert error.service == "mongodb"
        assert error.to_dict()["details"]["service"] == "mongodb"

    def test_external_service_error_preserves_other_details(self):
        error = ExternalServiceError(
            "Connection failed",
            service="mongodb",
            details={"host": "db.internal"}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "mongodb"
        assert result["details"]["host"] == "db.internal"
