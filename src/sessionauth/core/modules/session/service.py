from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from sessionauth.core.core import Service
from sessionauth.core.modules.session.models import AuthToken, SessionRecord

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """MongoDB-backed session store.

    Sessions are written by the sign-in flow; this service only looks them up
    and removes them. Every lookup goes to the database, nothing is cached.
    """

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("sessions")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        # Unique index for session_token (for authentication lookups)
        await self._collection.create_index([("session_token", 1)], unique=True)
        # Single index for user_id (for finding sessions by user)
        await self._collection.create_index([("user_id", 1)])
        # TTL index: MongoDB reaps each session once expires_at has passed
        await self._collection.create_index([("expires_at", 1)], expireAfterSeconds=0)

    async def find_session(self, token: AuthToken) -> SessionRecord | None:
        """Look up a session by exact token, joined with its owning user."""
        pipeline: list[dict[str, Any]] = [
            {"$match": {"session_token": token}},
            {"$limit": 1},
            {"$lookup": {"from": "users", "localField": "user_id", "foreignField": "_id", "as": "user"}},
            {"$unwind": "$user"},
        ]
        cursor = await self._collection.aggregate(pipeline)
        documents = await cursor.to_list(length=1)
        if not documents:
            return None
        return SessionRecord.model_validate(documents[0])

    async def delete_session(self, token: AuthToken) -> None:
        """Invalidate a session by removing it from the database."""
        result = await self._collection.delete_one({"session_token": token})
        logger.debug("session_deleted", deleted=result.deleted_count)
