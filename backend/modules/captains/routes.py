"""
Captain API endpoints.

Registration and login are public; profile and logout require a token.
Every error is raised as an AppError and rendered by the API error handlers.
"""

import logging

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_auth_service, get_captain_service
from api.middleware.auth import TOKEN_COOKIE, get_current_captain
from api.models.errors import ErrorResponse, ValidationErrorResponse
from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthContext

from .interfaces import ICaptainService
from .models import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    RegisterCaptainRequest,
)
from .exceptions import (
    CaptainAlreadyExistsError,
    CaptainNotRegisteredError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_BAD_REQUEST = {400: {"model": ValidationErrorResponse}}
_UNAUTHORIZED = {401: {"model": ErrorResponse}}


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=201,
    responses=_BAD_REQUEST,
)
async def register_captain(
    request: RegisterCaptainRequest,
    captains: ICaptainService = Depends(get_captain_service),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new captain and sign them in.

    The email must not be in use. The response carries a token and the
    captain without its password hash.
    """
    if await captains.find_by_email(request.email) is not None:
        raise CaptainAlreadyExistsError(request.email)

    password_hash = await auth.hash_password(request.password)
    captain = await captains.create_captain(request.to_new_captain(password_hash))
    token = auth.issue_token(captain.id)

    logger.info("Registered captain %s", captain.id)
    return AuthResponse(token=token, captain=captain.to_public())


@router.post("/login", response_model=AuthResponse, responses=_BAD_REQUEST)
async def login_captain(
    request: LoginRequest,
    captains: ICaptainService = Depends(get_captain_service),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange email and password for a token.

    An unknown email and a wrong password are reported with different
    messages.
    """
    captain = await captains.find_by_email(request.email)
    if captain is None:
        logger.info("Login attempt for unregistered email")
        raise CaptainNotRegisteredError()

    if not await auth.verify_password(request.password, captain.password):
        logger.info("Login failed for captain %s: wrong password", captain.id)
        raise InvalidCredentialsError()

    token = auth.issue_token(captain.id)
    return AuthResponse(token=token, captain=captain.to_public())


@router.get("/profile", response_model=ProfileResponse, responses=_UNAUTHORIZED)
async def get_captain_profile(
    context: AuthContext = Depends(get_current_captain),
) -> ProfileResponse:
    """Get the authenticated captain."""
    return ProfileResponse(captain=context.captain)


@router.get("/logout", response_model=MessageResponse, responses=_UNAUTHORIZED)
async def logout_captain(
    response: Response,
    context: AuthContext = Depends(get_current_captain),
    auth: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Revoke the presented token and clear the token cookie.

    The token stays rejected until it would have expired anyway.
    """
    await auth.revoke_token(context.token, context.payload)
    response.delete_cookie(TOKEN_COOKIE)
    logger.info("Captain %s logged out", context.captain.id)
    return MessageResponse(message="Logged out successfully")
