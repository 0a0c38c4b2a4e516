"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta
import pytest

from sessionauth.config import Config
from sessionauth.core.modules.session.models import AuthToken, SessionRecord
from sessionauth.core.modules.user.models import User


class FakeSessionStore:
    """In-memory session store that records every lookup."""

    def __init__(self, records: list[SessionRecord] | None = None, error: Exception | None = None) -> None:
        self.records = {record.session_token: record for record in records or []}
        self.error = error
        self.lookups: list[AuthToken] = []

    async def find_session(self, token: AuthToken) -> SessionRecord | None:
        self.lookups.append(token)
        if self.error is not None:
            raise self.error
        return self.records.get(token)


@pytest.fixture
def user_id():
    return "u1"


@pytest.fixture
def fixed_now():
    return datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_record(user_id):
    """Build a session record owned by the test user."""

    def _make(token: str, expires_at: datetime, email: str = "a@x.com", name: str | None = None) -> SessionRecord:
        return SessionRecord(
            session_token=token,
            user_id=user_id,
            expires_at=expires_at,
            user=User(id=user_id, email=email, name=name),
        )

    return _make


@pytest.fixture
def make_store():
    """Build a fake session store from records, or one that raises on lookup."""

    def _make(*records: SessionRecord, error: Exception | None = None) -> FakeSessionStore:
        return FakeSessionStore(list(records), error=error)

    return _make


@pytest.fixture
def live_record(make_record):
    """Session owned by a user without a name, valid for another day."""
    return make_record("abc123", datetime.now(UTC) + timedelta(days=1))


@pytest.fixture
def expired_record(make_record):
    return make_record("old456", datetime.now(UTC) - timedelta(minutes=1))


@pytest.fixture
def config():
    """Configuration pointing at a database that is never contacted."""
    return Config(database_url="mongodb://localhost:27017/sessionauth_test", cors_origins=[])


@pytest.fixture
def naive_record(user_id):
    """Record whose expiry lost its timezone, bypassing model validation as a faulty store would."""
    return SessionRecord.model_construct(
        session_token="naive789",
        user_id=user_id,
        expires_at=datetime.now() + timedelta(days=1),
        user=User(id=user_id, email="a@x.com"),
    )
