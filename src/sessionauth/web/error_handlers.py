import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from sessionauth.errors import (
    AuthenticationError,
    InvalidSessionError,
    NotFoundError,
    SessionStoreError,
    UserError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"error": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    if isinstance(exc, InvalidSessionError):
        status_code = 401
        error_type = "invalid_session"
    elif isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
    else:
        # Default for any other UserError subclass
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Handle malformed request bodies (400 with field details)."""
    details = exc.errors() if isinstance(exc, RequestValidationError) else []
    return JSONResponse(status_code=400, content={"error": "Invalid input", "details": jsonable_encoder(details)})


async def session_store_error_handler(_: Request, exc: Exception) -> Response:
    """Session store failures surface as a generic server error; the cause is already logged."""
    return create_json_error_response(status_code=500, message="Internal server error", error_type="internal_server_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(status_code=500, message="Internal server error", error_type="internal_server_error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SessionStoreError, session_store_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
