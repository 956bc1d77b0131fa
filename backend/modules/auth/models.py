"""
Authentication module data models.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from modules.captains.models import Captain


class TokenPayload(BaseModel):
    """Decoded claims of a captain bearer token."""

    sub: str = Field(..., description="Captain ID")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
    jti: Optional[str] = Field(None, description="Unique token ID")

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


class AuthContext(BaseModel):
    """
    Result of authenticating a request.

    Handed to protected route handlers by the auth dependency in place of
    anything stashed on the request object.
    """

    captain: Captain
    token: str
    payload: TokenPayload

    model_config = {"frozen": True}
