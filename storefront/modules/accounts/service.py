"""Domain services for account signup and login."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.crypto import DEFAULT_ROUNDS, hash_password, verify_password

from .exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidCredentialsError,
    MissingAccountFieldsError,
)
from .models import Account, AccountCreateInput
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: AccountRepository, *, hash_rounds: int = DEFAULT_ROUNDS) -> None:
        self._repository = repository
        self._hash_rounds = hash_rounds

    @classmethod
    def with_session(cls, session: AsyncSession, *, hash_rounds: int = DEFAULT_ROUNDS) -> "AccountService":
        from storefront.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session), hash_rounds=hash_rounds)

    async def get_by_username(self, username: str) -> Account | None:
        return await self._repository.get_by_username(username)

    async def signup(self, payload: AccountCreateInput) -> Account:
        username = (payload.username or "").strip()
        if not username or not payload.password:
            raise MissingAccountFieldsError("Username and password are required")
        payload.username = username

        existing = await self._repository.get_by_username(username)
        if existing is not None:
            raise AccountAlreadyExistsError("Username already exists")

        password_hash = hash_password(payload.password, self._hash_rounds)
        try:
            account = await self._repository.create_account(payload, password_hash=password_hash)
        except IntegrityError as exc:
            # lost a race against a concurrent signup for the same username
            raise AccountAlreadyExistsError("Username already exists") from exc
        logger.info("Account %s created", account.username)
        return account

    async def login(self, username: str, password: str) -> Account:
        """Return the account when ``password`` matches.

        Unknown usernames and wrong passwords raise different exceptions with
        different messages but share the same HTTP status.
        """
        username = (username or "").strip()
        if not username or not password:
            raise MissingAccountFieldsError("Username and password are required")

        account = await self._repository.get_by_username(username)
        if account is None:
            raise AccountNotFoundError("User not found")
        if not verify_password(password, account.password_hash):
            raise InvalidCredentialsError("Invalid password")
        logger.info("Account %s logged in", account.username)
        return account
