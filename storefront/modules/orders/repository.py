"""Order ledger abstraction and its in-process implementation."""

from __future__ import annotations

import asyncio
from typing import Protocol, Sequence

from .models import Order


class OrderRepository(Protocol):
    """Append-only ledger of placed orders."""

    async def append(self, order: Order) -> Order:
        ...

    async def list_all(self) -> Sequence[Order]:
        ...

    async def list_by_user(self, user_id: str) -> Sequence[Order]:
        ...


class InMemoryOrderRepository(OrderRepository):
    """Volatile ledger; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._lock = asyncio.Lock()

    async def append(self, order: Order) -> Order:
        async with self._lock:
            self._orders.append(order)
        return order

    async def list_all(self) -> Sequence[Order]:
        async with self._lock:
            return list(self._orders)

    async def list_by_user(self, user_id: str) -> Sequence[Order]:
        async with self._lock:
            return [order for order in self._orders if order.user_id == user_id]
