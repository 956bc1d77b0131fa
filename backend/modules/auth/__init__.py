"""
Authentication module.

Handles password hashing, bearer token issuance and verification, and
logout via the token blacklist.

Public API:
- IAuthService: Interface for auth operations
- AuthContext: What a protected route receives about its caller
- TokenPayload: Decoded token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthContext, TokenPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    RevokedTokenError,
    UnknownCaptainError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthContext",
    "TokenPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "RevokedTokenError",
    "UnknownCaptainError",
]
