"""Session management models."""

from typing import NewType

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from sessionauth.core.db import DocumentId, MongoModel
from sessionauth.core.modules.user.models import User

AuthToken = NewType("AuthToken", str)

# Token sources shared with existing clients; the names must not change.
SESSION_COOKIE_NAME = "next-auth.session-token"
AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "


class Session(MongoModel):
    """User authentication session.

    Indexed on session_token - unique, user_id, expires_at (TTL, expires at the stored time).
    """

    session_token: str
    user_id: DocumentId
    expires_at: AwareDatetime


class SessionRecord(Session):
    """Session joined with its owning user, as returned by a store lookup."""

    user: User


class Principal(BaseModel):
    """Authenticated identity attached to a single request."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="E-mail address")
    name: str | None = Field(None, description="Display name, if the user has one")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_record(cls, record: SessionRecord) -> "Principal":
        return cls(id=record.user.id, email=record.user.email, name=record.user.name or None)
