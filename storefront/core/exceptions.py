"""Error taxonomy shared by every module.

Each module defines its own exceptions on top of these bases; the HTTP layer
only needs ``status_code`` and the message to build a response.
"""

from fastapi import status


class StorefrontError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or "Error"


class ValidationError(StorefrontError):
    """Missing or empty required fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(StorefrontError):
    """Resource already exists."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(StorefrontError):
    """Credentials could not be verified."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(StorefrontError):
    """The asset store or the database failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


__all__ = [
    "StorefrontError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "UpstreamError",
]
