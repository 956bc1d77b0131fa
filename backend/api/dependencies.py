"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from pymongo.asynchronous.database import AsyncDatabase
    from modules.auth.blacklist import TokenBlacklistRepository
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenService
    from modules.captains.interfaces import ICaptainService
    from modules.captains.repository import CaptainRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and cached
    as singletons within the container.

    The database handle and settings may be passed in explicitly; otherwise
    the process-wide ones are used.
    """

    def __init__(
        self,
        database: "AsyncDatabase | None" = None,
        settings: Settings | None = None,
    ) -> None:
        self._database = database
        self._settings = settings
        self._captain_repository: "CaptainRepository | None" = None
        self._token_blacklist: "TokenBlacklistRepository | None" = None
        self._token_service: "TokenService | None" = None
        self._captain_service: "ICaptainService | None" = None
        self._auth_service: "IAuthService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> "AsyncDatabase":
        """Get the database handle."""
        if self._database is None:
            from shared.database import get_database
            self._database = get_database()
        return self._database

    @property
    def captain_repository(self) -> "CaptainRepository":
        """Get the captain repository instance."""
        if self._captain_repository is None:
            from modules.captains.repository import CaptainRepository
            self._captain_repository = CaptainRepository(self.database)
        return self._captain_repository

    @property
    def token_blacklist(self) -> "TokenBlacklistRepository":
        """Get the token blacklist repository instance."""
        if self._token_blacklist is None:
            from modules.auth.blacklist import TokenBlacklistRepository
            self._token_blacklist = TokenBlacklistRepository(self.database)
        return self._token_blacklist

    @property
    def tokens(self) -> "TokenService":
        """Get the token signing service."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                expires_minutes=self.settings.jwt_expires_minutes,
            )
        return self._token_service

    @property
    def captains(self) -> "ICaptainService":
        """Get the captain service instance."""
        if self._captain_service is None:
            from modules.captains.service import CaptainService
            self._captain_service = CaptainService(self.captain_repository)
        return self._captain_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                tokens=self.tokens,
                blacklist=self.token_blacklist,
                captains=self.captains,
                bcrypt_rounds=self.settings.bcrypt_rounds,
            )
        return self._auth_service

    async def ensure_indexes(self) -> None:
        """Create the indexes every repository relies on."""
        await self.captain_repository.ensure_indexes()
        await self.token_blacklist.ensure_indexes()

    def reset(self) -> None:
        """
        Reset all cached services.

        The explicitly supplied database and settings are kept.
        """
        self._captain_repository = None
        self._token_blacklist = None
        self._token_service = None
        self._captain_service = None
        self._auth_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a specific container, e.g. one wired to a test database."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() will create a fresh container.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_captain_service() -> "ICaptainService":
    """FastAPI dependency for captain service."""
    return get_container().captains


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth
