from typing import Annotated, cast

import structlog
from fastapi import Depends, Request
from fastapi.security import APIKeyCookie, APIKeyHeader

from sessionauth.app import App
from sessionauth.config import Config
from sessionauth.core.modules.session.models import AUTHORIZATION_HEADER, SESSION_COOKIE_NAME, AuthToken, Principal
from sessionauth.core.modules.session.validator import (
    Authenticated,
    InvalidSession,
    LookupFailed,
    SessionStore,
    Unauthenticated,
    extract_session_token,
    validate_session,
)
from sessionauth.errors import AuthenticationError, InvalidSessionError, SessionStoreError

logger = structlog.get_logger(__name__)

# Security schemes
cookie_scheme = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)
authorization_scheme = APIKeyHeader(
    name=AUTHORIZATION_HEADER, auto_error=False, description="Session token as `Bearer <token>`"
)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_session_store(app: Annotated[App, Depends(get_app)]) -> SessionStore:
    return app.session_store


async def get_session_token(
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
    authorization: Annotated[str | None, Depends(authorization_scheme)] = None,
) -> AuthToken | None:
    """Candidate session token from the session cookie, else the Authorization header."""
    return extract_session_token(token_cookie, authorization)


def get_principal(request: Request) -> Principal | None:
    """Principal attached to this request, or None for anonymous requests."""
    return cast(Principal | None, getattr(request.state, "principal", None))


def attach_principal(request: Request, principal: Principal) -> Principal:
    attached = get_principal(request)
    if attached is not None:
        return attached
    request.state.principal = principal
    return principal


async def require_principal(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
    token: Annotated[AuthToken | None, Depends(get_session_token)],
) -> Principal:
    """Reject the request unless it carries a live session."""
    match await validate_session(store, token):
        case Authenticated(principal):
            return attach_principal(request, principal)
        case Unauthenticated():
            raise AuthenticationError
        case InvalidSession():
            raise InvalidSessionError
        case LookupFailed(error):
            logger.error("session_lookup_failed", path=request.url.path, exc_info=error)
            raise SessionStoreError("Session lookup failed") from error


async def optional_principal(
    request: Request,
    store: Annotated[SessionStore, Depends(get_session_store)],
    token: Annotated[AuthToken | None, Depends(get_session_token)],
) -> Principal | None:
    """Attach the principal when the session is live; never reject.

    Store failures are absorbed as well, so during an outage these requests
    proceed anonymously.
    """
    match await validate_session(store, token):
        case Authenticated(principal):
            return attach_principal(request, principal)
        case LookupFailed(error):
            logger.warning("optional_session_lookup_failed", path=request.url.path, error=repr(error))
    return None


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
SessionTokenDep = Annotated[AuthToken | None, Depends(get_session_token)]
PrincipalDep = Annotated[Principal, Depends(require_principal)]
OptionalPrincipalDep = Annotated[Principal | None, Depends(optional_principal)]
