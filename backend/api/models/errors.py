"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel, Field
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class FieldError(BaseModel):
    """One failed field rule."""

    field: str
    message: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    errors: list[FieldError]
