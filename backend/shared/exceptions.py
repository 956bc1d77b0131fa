"""
Base exception classes for the Captains backend.

Each module should define its own exceptions that inherit from these bases.
Every class carries the HTTP status the API error handlers answer with, so
route handlers can simply raise.
"""

from typing import Optional, Any


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

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
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(AppError):
    """Resource not found."""

    status_code = 404


class ValidationError(AppError):
    """Input validation failed."""

    status_code = 400


class ConflictError(AppError):
    """Resource already exists or violates a uniqueness constraint."""

    status_code = 409


class AuthenticationError(AppError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class ExternalServiceError(AppError):
    """Error communicating with an external service."""

    status_code = 503

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
