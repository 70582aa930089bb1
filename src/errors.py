"""Application error taxonomy.

Every foreseeable failure is raised as an ``AppError`` subclass and turned
into a ``{"success": false, "message": ...}`` response by the handlers
registered in ``src.main``. Anything else is collapsed into a generic 500.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(AppError):
    """A unique field is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already registered"


class AuthenticationError(AppError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class AuthorizationError(AppError):
    """Authenticated but not permitted."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ServerError(AppError):
    """Unexpected internal failure. The message never carries internal detail."""


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenMalformedError(TokenError):
    """Token cannot be parsed, its signature does not match, or claims are missing."""


class TokenExpiredError(TokenError):
    """Token is past its expiry time."""
