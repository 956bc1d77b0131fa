"""
Captain repository for database access.

Encapsulates all MongoDB queries and document mapping for the ``captains``
collection.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from shared.repository import BaseRepository
from .exceptions import CaptainAlreadyExistsError
from .models import CaptainInDB, Fullname, NewCaptain, Vehicle, VehicleType

logger = logging.getLogger(__name__)


class CaptainRepository(BaseRepository[CaptainInDB]):
    """
    Repository for captain documents.

    Emails are matched exactly as stored; no case folding is applied.
    """

    collection_name = "captains"

    async def ensure_indexes(self) -> None:
        """Unique email index; the registration pre-check relies on it under races."""
        await self._collection.create_index("email", unique=True)

    async def get_by_email(self, email: str) -> Optional[CaptainInDB]:
        document = await self._collection.find_one({"email": email})
        if document is None:
            return None
        return self._map_to_captain(document)

    async def get_by_id(self, captain_id: str) -> Optional[CaptainInDB]:
        if not ObjectId.is_valid(captain_id):
            return None
        document = await self._collection.find_one({"_id": ObjectId(captain_id)})
        if document is None:
            return None
        return self._map_to_captain(document)

    async def create(self, new_captain: NewCaptain) -> CaptainInDB:
        """
        Insert a captain document.

        Args:
            new_captain: Fields to store; ``password`` must already be a hash.

        Returns:
            The stored captain with generated ID and creation time.

        Raises:
            CaptainAlreadyExistsError: If the unique email index rejects the insert.
        """
        document = self._to_document(new_captain)
        try:
            result = await self._collection.insert_one(document)
        except DuplicateKeyError as exc:
            logger.info("Rejected duplicate captain email at insert")
            raise CaptainAlreadyExistsError(new_captain.email) from exc

        document["_id"] = result.inserted_id
        return self._map_to_captain(document)

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _to_document(self, captain: NewCaptain) -> dict[str, Any]:
        return {
            "fullname": {
                "firstname": captain.fullname.firstname,
                "lastname": captain.fullname.lastname,
            },
            "email": captain.email,
            "password": captain.password,
            "vehicle": {
                "color": captain.vehicle.color,
                "plate": captain.vehicle.plate,
                "capacity": captain.vehicle.capacity,
                "vehicle_type": captain.vehicle.vehicle_type.value,
            },
            "created_at": datetime.now(timezone.utc),
        }

    def _map_to_captain(self, document: dict[str, Any]) -> CaptainInDB:
        fullname = document.get("fullname", {})
        vehicle = document.get("vehicle", {})
        return CaptainInDB(
            id=str(document["_id"]),
            fullname=Fullname(
                firstname=fullname["firstname"],
                lastname=fullname.get("lastname"),
            ),
            email=document["email"],
            password=document["password"],
            vehicle=Vehicle(
                color=vehicle["color"],
                plate=vehicle["plate"],
                capacity=vehicle["capacity"],
                vehicle_type=VehicleType(vehicle["vehicle_type"]),
            ),
            created_at=document.get("created_at"),
        )
