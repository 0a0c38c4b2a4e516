from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sessionauth.config import Config
from sessionauth.core.core import Core
from sessionauth.core.modules.session.models import AuthToken
from sessionauth.core.modules.session.validator import SessionStore
from sessionauth.errors import ValidationError


class App:
    """Facade for all application operations, delegating to Core services."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    @property
    def session_store(self) -> SessionStore:
        """Store consulted by the access gates."""
        return self._core.services.session

    async def signup(self, email: str) -> None:
        """Check that a new account can be created for this e-mail.

        The verification e-mail itself is sent by the sign-in provider.
        """
        if await self._core.services.user.has_email(email):
            raise ValidationError("User with this email already exists")

    async def login(self, email: str) -> None:
        """Check that an account exists before the sign-in e-mail is requested."""
        await self._core.services.user.ensure_email_exists(email)

    async def logout(self, auth_token: AuthToken) -> None:
        """Invalidate user session."""
        await self._core.services.session.delete_session(auth_token)
