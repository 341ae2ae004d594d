"""Account related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.container import ApplicationContainer
from storefront.infrastructure.database.repositories.account_repository import SqlAccountRepository
from storefront.modules.accounts.service import AccountService

from .container import get_app_container
from .database import get_db_session


def get_account_repository(db: AsyncSession = Depends(get_db_session)) -> SqlAccountRepository:
    return SqlAccountRepository(db)


def get_account_service(
    repository: SqlAccountRepository = Depends(get_account_repository),
    container: ApplicationContainer = Depends(get_app_container),
) -> AccountService:
    return AccountService(repository, hash_rounds=container.settings.security.bcrypt_rounds)


__all__ = [
    "get_account_repository",
    "get_account_service",
]
