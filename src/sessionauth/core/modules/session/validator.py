"""Session token extraction and validation.

Both access gates go through :func:`validate_session`, so the expiry rule
exists in exactly one place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from sessionauth.core.modules.session.models import BEARER_PREFIX, AuthToken, Principal, SessionRecord
from sessionauth.utils import now as utc_now


class SessionStore(Protocol):
    async def find_session(self, token: AuthToken) -> SessionRecord | None:
        """Return the session for an exact token match together with its user, or None."""
        ...


@dataclass(frozen=True, slots=True)
class Unauthenticated:
    """No token was supplied."""


@dataclass(frozen=True, slots=True)
class InvalidSession:
    """A token was supplied but no live session matches it."""


@dataclass(frozen=True, slots=True)
class Authenticated:
    principal: Principal


@dataclass(frozen=True, slots=True)
class LookupFailed:
    """The session store raised instead of answering."""

    error: Exception


SessionOutcome = Unauthenticated | InvalidSession | Authenticated | LookupFailed


def extract_session_token(cookie_value: str | None, authorization: str | None) -> AuthToken | None:
    """Pick the candidate session token, cookie first, then the Authorization header.

    A ``Bearer `` prefix on the header is stripped; a header without it is taken as-is.
    """
    if cookie_value:
        return AuthToken(cookie_value)

    if not authorization:
        return None
    token = authorization.removeprefix(BEARER_PREFIX).strip()
    return AuthToken(token) if token else None


def is_expired(record: SessionRecord, at: datetime) -> bool:
    """A session is live only while its expiry is strictly in the future."""
    return record.expires_at <= at


async def validate_session(store: SessionStore, token: AuthToken | None, now: datetime | None = None) -> SessionOutcome:
    """Resolve a candidate token into a session outcome with a single store lookup."""
    if token is None:
        return Unauthenticated()

    # A record the store hands back but that cannot be checked counts as a store failure.
    try:
        record = await store.find_session(token)
        if record is None or is_expired(record, now or utc_now()):
            return InvalidSession()
        principal = Principal.from_record(record)
    except Exception as e:
        return LookupFailed(e)

    return Authenticated(principal)
