"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API error
handlers, which answer with 401 and a ``WWW-Authenticate: Bearer`` header.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no token is provided in the cookie or Authorization header."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class RevokedTokenError(AuthenticationError):
    """Raised when a token was blacklisted by a logout."""

    def __init__(self, message: str = "Authentication token has been revoked"):
        super().__init__(message, code="TOKEN_REVOKED")


class UnknownCaptainError(AuthenticationError):
    """Raised when a valid token names a captain that no longer exists."""

    def __init__(self, captain_id: str):
        super().__init__(
            "Captain not found",
            code="CAPTAIN_NOT_FOUND",
            details={"captain_id": captain_id},
        )
