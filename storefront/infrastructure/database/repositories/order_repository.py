"""SQLAlchemy implementation of the order ledger."""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.db.models import Order as OrderModel
from storefront.modules.orders.models import Order, OrderItem
from storefront.modules.orders.repository import OrderRepository


class SqlOrderRepository(OrderRepository):
    """Durable order ledger; each append is flushed inside the request transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, order: Order) -> Order:
        model = OrderModel(
            id=order.id,
            user_id=order.user_id,
            shipping_address=order.shipping_address,
            items=[asdict(item) for item in order.items],
            total=order.total,
            payment_method=order.payment_method,
            cash_collected=order.cash_collected,
            images=order.images,
            created_at=order.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return order

    async def list_all(self) -> Sequence[Order]:
        stmt = select(OrderModel).order_by(OrderModel.created_at, OrderModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_user(self, user_id: str) -> Sequence[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at, OrderModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            shipping_address=dict(model.shipping_address or {}),
            items=[OrderItem(**item) for item in model.items or []],
            total=model.total,
            created_at=model.created_at,
            payment_method=model.payment_method,
            cash_collected=model.cash_collected,
            images=list(model.images or []),
        )
