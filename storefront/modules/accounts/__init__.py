"""Account domain services and models."""

from .exceptions import (
    AccountAlreadyExistsError,
    AccountError,
    AccountNotFoundError,
    InvalidCredentialsError,
    MissingAccountFieldsError,
)
from .models import Account, AccountCreateInput, Address
from .service import AccountService

__all__ = [
    "Account",
    "AccountCreateInput",
    "Address",
    "AccountService",
    "AccountError",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "InvalidCredentialsError",
    "MissingAccountFieldsError",
]
