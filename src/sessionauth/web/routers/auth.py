from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, EmailStr, Field

from sessionauth.core.modules.session.models import SESSION_COOKIE_NAME, Principal
from sessionauth.web.deps import AppDep, ConfigDep, OptionalPrincipalDep, PrincipalDep, SessionTokenDep, require_principal
from sessionauth.web.openapi import ErrorResponse

router = APIRouter(prefix="/auth", tags=["auth"])


class SignupRequest(BaseModel):
    """Request to start e-mail sign-up."""

    email: EmailStr = Field(..., description="E-mail address for the new account")
    name: str | None = Field(None, description="Optional display name")


class LoginRequest(BaseModel):
    """Request to start e-mail login."""

    email: EmailStr = Field(..., description="E-mail address of an existing account")


class EmailSentResponse(BaseModel):
    message: str
    email: str


class MessageResponse(BaseModel):
    message: str


class CurrentUserResponse(BaseModel):
    """Principal attached to the request; null when anonymous."""

    user: Principal | None


@router.post(
    "/signup",
    summary="Start sign-up",
    description="Validate the e-mail and make sure no account uses it yet. The verification e-mail is sent by the sign-in provider.",
    operation_id="signup",
    responses={
        200: {"description": "Verification e-mail requested"},
        400: {"model": ErrorResponse, "description": "Invalid input or user already exists"},
    },
)
async def signup(data: SignupRequest, app: AppDep) -> EmailSentResponse:
    await app.signup(data.email)
    return EmailSentResponse(message="Verification email sent. Please check your inbox.", email=data.email)


@router.post(
    "/login",
    summary="Start login",
    description="Make sure an account exists for the e-mail. The login e-mail is sent by the sign-in provider.",
    operation_id="login",
    responses={
        200: {"description": "Login e-mail requested"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "No account for this e-mail"},
    },
)
async def login(data: LoginRequest, app: AppDep) -> EmailSentResponse:
    await app.login(data.email)
    return EmailSentResponse(message="Login email sent. Please check your inbox.", email=data.email)


@router.get(
    "/me",
    summary="Get current user",
    operation_id="getCurrentUser",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Authenticated user"},
        401: {"model": ErrorResponse, "description": "Not authenticated or session expired"},
    },
)
async def me(principal: PrincipalDep) -> CurrentUserResponse:
    return CurrentUserResponse(user=principal)


@router.get(
    "/session",
    summary="Get session, if any",
    description="Return the current user when the request carries a live session, otherwise null.",
    operation_id="getSession",
)
async def session(principal: OptionalPrincipalDep) -> CurrentUserResponse:
    return CurrentUserResponse(user=principal)


@router.post(
    "/logout",
    summary="End session",
    description="Invalidate the current session and clear the session cookie.",
    operation_id="logout",
    dependencies=[Depends(require_principal)],
    responses={
        200: {"description": "Successfully logged out"},
        401: {"model": ErrorResponse, "description": "Not authenticated or session expired"},
    },
)
async def logout(auth_token: SessionTokenDep, app: AppDep, config: ConfigDep, response: Response) -> MessageResponse:
    if auth_token is not None:
        await app.logout(auth_token)
    response.delete_cookie(SESSION_COOKIE_NAME, path="/", secure=config.cookie_secure, httponly=True, samesite="lax")
    return MessageResponse(message="Logged out successfully")
