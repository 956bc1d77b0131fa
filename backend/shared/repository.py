"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB collection access and providing shared utilities for data operations.
"""

from typing import Any, TypeVar, Generic
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Collection access via self._collection, named by ``collection_name``
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle document-to-Pydantic model mapping internally.

    Example:
        class CaptainRepository(BaseRepository[CaptainInDB]):
            collection_name = "captains"

            async def get_by_email(self, email: str) -> Optional[CaptainInDB]:
                document = await self._collection.find_one({"email": email})
                if document is None:
                    return None
                return self._map_to_captain(document)
    """

    collection_name: str = ""

    def __init__(self, db: AsyncDatabase) -> None:
        """
        Initialize the repository with a database handle.

        Args:
            db: Database the repository's collection lives in.
        """
        if not self.collection_name:
            raise TypeError(f"{type(self).__name__} must set collection_name")
        self._db = db
        self._collection: AsyncCollection[dict[str, Any]] = db[self.collection_name]

    async def ensure_indexes(self) -> None:
        """Create the indexes this repository relies on. Override as needed."""
        return None
