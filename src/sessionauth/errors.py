from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when a request carries no session credential."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidSessionError(AuthenticationError):
    """Raised when a session credential is presented but does not map to a live session."""

    def __init__(self, message: str = "Invalid or expired session") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class SessionStoreError(Exception):
    """Raised when the session store cannot answer a lookup.

    Not a UserError: the underlying cause is logged, never shown to the client.
    """
