from datetime import datetime

from pydantic import Field

from sessionauth.core.db import MongoModel
from sessionauth.utils import now


class User(MongoModel):
    """User account created by the sign-in flow."""

    email: str
    name: str | None = None
    email_verified_at: datetime | None = None
    created_at: datetime = Field(default_factory=now)
