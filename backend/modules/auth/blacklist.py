"""
Token blacklist repository.

Holds tokens invalidated by logout. Each entry keeps the token's own expiry,
and a TTL index lets MongoDB drop it once the token could not verify anyway.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from pymongo.errors import DuplicateKeyError

from shared.repository import BaseRepository

logger = logging.getLogger(__name__)


class TokenBlacklistRepository(BaseRepository[str]):
    """Repository for the ``blacklisted_tokens`` collection."""

    collection_name = "blacklisted_tokens"

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("token", unique=True)
        await self._collection.create_index("expires_at", expireAfterSeconds=0)

    async def add(self, token: str, expires_at: datetime) -> None:
        """
        Blacklist a token. Adding the same token again is a no-op.

        Args:
            token: Raw token string as presented by the client
            expires_at: When the token expires on its own
        """
        try:
            await self._collection.update_one(
                {"token": token},
                {
                    "$setOnInsert": {
                        "created_at": datetime.now(timezone.utc),
                        "expires_at": expires_at,
                    }
                },
                upsert=True,
            )
        except DuplicateKeyError:
            # Concurrent upserts of one token: the other insert won.
            logger.debug("Token already blacklisted")

    async def contains(self, token: str) -> bool:
        document = await self._collection.find_one({"token": token}, {"_id": 1})
        return document is not None

    async def prune_expired(self, now: Optional[datetime] = None) -> int:
        """
        Delete entries whose token has expired.

        The TTL monitor does this on its own schedule; this is for callers
        that need it done now.

        Returns:
            Number of entries removed
        """
        cutoff = now or datetime.now(timezone.utc)
        result = await self._collection.delete_many({"expires_at": {"$lte": cutoff}})
        if result.deleted_count:
            logger.info("Pruned %d expired blacklist entries", result.deleted_count)
        return result.deleted_count
