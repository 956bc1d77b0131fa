"""
Shared infrastructure for the Captains backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client lifecycle
- exceptions: Base exception classes
- logging_config: Logging setup
- repository: Base repository

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_mongo_client,
    get_database,
    close_mongo_client,
    reset_client_cache,
)
from .exceptions import (
    AppError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ExternalServiceError,
)
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "close_mongo_client",
    "reset_client_cache",
    "AppError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "ExternalServiceError",
    "configure_logging",
]
