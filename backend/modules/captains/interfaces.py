"""
Captain module interface.

Route handlers and the auth module depend on ICaptainService, never on the
repository, so neither knows how captains are stored.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CaptainInDB, NewCaptain


@runtime_checkable
class ICaptainService(Protocol):
    """Interface for captain record operations."""

    async def create_captain(self, new_captain: NewCaptain) -> CaptainInDB:
        """
        Persist a new captain.

        Args:
            new_captain: Validated fields with the password already hashed

        Returns:
            The stored captain with its generated ID

        Raises:
            CaptainAlreadyExistsError: If the email is already taken
        """
        ...

    async def find_by_email(self, email: str) -> Optional[CaptainInDB]:
        """Exact-match lookup by email. Returns None if absent."""
        ...

    async def get_captain(self, captain_id: str) -> Optional[CaptainInDB]:
        """Lookup by ID. Returns None if absent or the ID is malformed."""
        ...
