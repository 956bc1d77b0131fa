"""
Captain authentication dependency.

Reads the bearer token from the ``token`` cookie, falling back to the
``Authorization: Bearer`` header, and resolves it through the auth service.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthContext

from ..dependencies import get_auth_service

TOKEN_COOKIE = "token"

# Token extractors; neither fails on its own so the cookie can fall back to the header.
cookie_scheme = APIKeyCookie(name=TOKEN_COOKIE, auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


def extract_token(
    cookie_token: Optional[str],
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Pick the token to authenticate with. The cookie wins over the header."""
    if cookie_token:
        return cookie_token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


async def get_current_captain(
    cookie_token: Optional[str] = Depends(cookie_scheme),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthContext:
    """
    Dependency that requires an authenticated captain.

    Usage:
        @router.get("/protected")
        async def protected_route(context: AuthContext = Depends(get_current_captain)):
            return {"captain_id": context.captain.id}

    Raises:
        AuthenticationError: Answered with 401 by the API error handlers
    """
    token = extract_token(cookie_token, credentials)
    return await auth.authenticate(token)


# Type alias for cleaner route definitions
RequireCaptain = Depends(get_current_captain)
