# storefront/core/errors.py
"""
Application error taxonomy.

Services raise these; the handlers registered in ``storefront.main`` turn them
into ``{"success": false, "message": ...}`` responses with the matching status.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto a specific HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(AppError):
    """Credentials did not match."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """A unique value (e.g. an email address) is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"
