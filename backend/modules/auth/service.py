"""
Authentication service implementation.

Composes password hashing, token signing, the token blacklist and captain
lookup into the session lifecycle used by the API.
"""

import logging
from typing import Optional

from modules.captains.interfaces import ICaptainService

from .blacklist import TokenBlacklistRepository
from .exceptions import MissingTokenError, RevokedTokenError, UnknownCaptainError
from .interfaces import IAuthService
from .models import AuthContext, TokenPayload
from .passwords import DEFAULT_ROUNDS, hash_password, verify_password
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Checks run in a fixed order: presence, signature and expiry, blacklist,
    then captain lookup. The first failure ends the request.
    """

    def __init__(
        self,
        tokens: TokenService,
        blacklist: TokenBlacklistRepository,
        captains: ICaptainService,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self._tokens = tokens
        self._blacklist = blacklist
        self._captains = captains
        self._bcrypt_rounds = bcrypt_rounds

    async def hash_password(self, password: str) -> str:
        return await hash_password(password, rounds=self._bcrypt_rounds)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        return await verify_password(password, password_hash)

    def issue_token(self, captain_id: str) -> str:
        return self._tokens.issue(captain_id)

    async def authenticate(self, token: Optional[str]) -> AuthContext:
        if not token:
            raise MissingTokenError()

        payload = self._tokens.decode(token)

        if await self._blacklist.contains(token):
            raise RevokedTokenError()

        captain = await self._captains.get_captain(payload.sub)
        if captain is None:
            logger.info("Token subject %s no longer resolves to a captain", payload.sub)
            raise UnknownCaptainError(payload.sub)

        return AuthContext(captain=captain.to_public(), token=token, payload=payload)

    async def revoke_token(self, token: str, payload: Optional[TokenPayload] = None) -> None:
        if payload is None:
            payload = self._tokens.decode(token)
        await self._blacklist.add(token, payload.expires_at)
        logger.info("Revoked token for captain %s", payload.sub)
