"""Order ledger dependency providers."""

from collections.abc import AsyncGenerator

from fastapi import Depends

from storefront.core.container import ApplicationContainer
from storefront.infrastructure.database import get_session
from storefront.infrastructure.database.repositories.order_repository import SqlOrderRepository
from storefront.modules.orders import OrderRepository, OrderService

from .container import get_app_container


async def get_order_repository(
    container: ApplicationContainer = Depends(get_app_container),
) -> AsyncGenerator[OrderRepository, None]:
    if container.settings.orders.backend == "database":
        async for session in get_session():
            yield SqlOrderRepository(session)
        return
    yield container.order_ledger


def get_order_service(
    repository: OrderRepository = Depends(get_order_repository),
    container: ApplicationContainer = Depends(get_app_container),
) -> OrderService:
    return OrderService(
        repository,
        guest_user_id=container.settings.orders.guest_user_id,
        id_generator=container.order_ids,
    )


__all__ = [
    "get_order_repository",
    "get_order_service",
]
