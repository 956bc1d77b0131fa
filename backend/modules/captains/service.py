"""
Captain service implementation.

A thin seam over the repository; uniqueness is enforced by the store.
"""

from typing import Optional

from .interfaces import ICaptainService
from .models import CaptainInDB, NewCaptain
from .repository import CaptainRepository


class CaptainService(ICaptainService):
    """Implementation of the captain service backed by CaptainRepository."""

    def __init__(self, repository: CaptainRepository):
        self._repository = repository

    async def create_captain(self, new_captain: NewCaptain) -> CaptainInDB:
        return await self._repository.create(new_captain)

    async def find_by_email(self, email: str) -> Optional[CaptainInDB]:
        return await self._repository.get_by_email(email)

    async def get_captain(self, captain_id: str) -> Optional[CaptainInDB]:
        return await self._repository.get_by_id(captain_id)
