"""
Authentication module interface.

Route handlers and the auth dependency depend on IAuthService, not the
concrete implementation. This enables testing with fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthContext, TokenPayload


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    Covers the credential primitives (hashing, token issuance) and the
    session lifecycle (authenticate, revoke).
    """

    async def hash_password(self, password: str) -> str:
        """One-way, salted hash of a plaintext password."""
        ...

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password with a stored hash."""
        ...

    def issue_token(self, captain_id: str) -> str:
        """Sign a time-limited bearer token for a captain."""
        ...

    async def authenticate(self, token: Optional[str]) -> AuthContext:
        """
        Resolve a bearer token to the captain it belongs to.

        Args:
            token: Raw token from the cookie or Authorization header

        Returns:
            AuthContext with the public captain, the token and its claims

        Raises:
            AuthenticationError: If the token is missing, invalid, expired,
                revoked, or names a captain that no longer exists
        """
        ...

    async def revoke_token(self, token: str, payload: Optional[TokenPayload] = None) -> None:
        """
        Blacklist a token until its natural expiry.

        Args:
            token: Raw token string
            payload: Already-verified claims; decoded from ``token`` if omitted
        """
        ...
