"""
Seed a demo storefront account.

    python scripts/init_account.py [username] [password]
"""
import asyncio
import logging
import sys

from storefront.core.config import get_settings
from storefront.core.logging import setup_logging
from storefront.infrastructure.database import get_session, init_db
from storefront.modules.accounts import AccountCreateInput, AccountService

logger = logging.getLogger("init_account")


async def create_default_account(username: str, password: str) -> None:
    settings = get_settings()
    await init_db()

    async for db in get_session():
        service = AccountService.with_session(db, hash_rounds=settings.security.bcrypt_rounds)

        if await service.get_by_username(username):
            logger.info("Account %s already exists", username)
            return

        await service.signup(AccountCreateInput(username=username, password=password, first_name="Demo"))
        logger.info("Created demo account %s", username)


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.logging.level)
    args = sys.argv[1:]
    asyncio.run(
        create_default_account(
            args[0] if args else "demo",
            args[1] if len(args) > 1 else "demo1234",
        )
    )
