"""Request-level dependencies shared by routers."""

from .auth import get_current_captain, extract_token, TOKEN_COOKIE, RequireCaptain

__all__ = ["get_current_captain", "extract_token", "TOKEN_COOKIE", "RequireCaptain"]
