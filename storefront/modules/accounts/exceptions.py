"""Account domain specific exceptions."""

from storefront.core.exceptions import AuthError, ConflictError, StorefrontError, ValidationError


class AccountError(StorefrontError):
    """Base class for account domain errors."""


class AccountAlreadyExistsError(ConflictError, AccountError):
    """Raised when attempting to create an account with duplicate username."""


class AccountNotFoundError(AuthError, AccountError):
    """Raised when the requested account cannot be found."""


class InvalidCredentialsError(AuthError, AccountError):
    """Raised when the supplied password does not match the stored hash."""


class MissingAccountFieldsError(ValidationError, AccountError):
    """Raised when signup or login payloads lack required fields."""
