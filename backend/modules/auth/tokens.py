"""
Signed bearer tokens (JWT via PyJWT).
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import TokenPayload

logger = logging.getLogger(__name__)


class TokenService:
    """
    Issues and verifies captain tokens.

    Tokens carry the captain ID as ``sub`` plus ``iat``, ``exp`` and a random
    ``jti``, so two tokens issued in the same second still differ.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 24 * 60,
    ):
        if not secret:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expires_minutes)

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, captain_id: str, now: Optional[datetime] = None) -> str:
        """Sign a new token for a captain."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": captain_id,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenPayload:
        """
        Verify signature and expiry and return the claims.

        Raises:
            ExpiredTokenError: If the token is past its ``exp``
            InvalidTokenError: For any other verification failure
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError()

        return TokenPayload(**claims)
