"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.db.models import Account as AccountModel
from storefront.modules.accounts.models import Account, AccountCreateInput, Address
from storefront.modules.accounts.repository import AccountRepository


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_username(self, username: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.username == username)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_account(self, payload: AccountCreateInput, *, password_hash: str) -> Account:
        model = AccountModel(
            username=payload.username,
            password_hash=password_hash,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone,
            street=payload.address.street,
            city=payload.address.city,
            state=payload.address.state,
            postal_code=payload.address.postal_code,
            country=payload.address.country,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        account = self._to_domain(model)
        assert account is not None
        return account

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            username=model.username,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            address=Address(
                street=model.street,
                city=model.city,
                state=model.state,
                postal_code=model.postal_code,
                country=model.country,
            ),
            created_at=model.created_at,
        )
