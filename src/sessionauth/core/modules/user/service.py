from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from sessionauth.core.core import Service
from sessionauth.errors import NotFoundError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Read access to user accounts. Accounts are written by the sign-in flow."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def has_email(self, email: str) -> bool:
        """Check if a user with the given e-mail exists."""
        return await self._collection.count_documents({"email": email}, limit=1) > 0

    async def ensure_email_exists(self, email: str) -> None:
        """Raise NotFoundError unless a user with the given e-mail exists."""
        if not await self.has_email(email):
            raise NotFoundError("User not found. Please sign up first.")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("email", 1)], unique=True)
        logger.debug("user_service_started")
