"""Order domain specific exceptions."""

from storefront.core.exceptions import StorefrontError, ValidationError


class OrderError(StorefrontError):
    """Base class for order domain errors."""


class EmptyOrderError(ValidationError, OrderError):
    """Raised when an order is placed without any items."""


class MissingUserIdError(ValidationError, OrderError):
    """Raised when per-user order listing is requested without a user id."""
