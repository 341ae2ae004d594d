"""Domain services for placing and listing orders."""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Sequence

from .exceptions import EmptyOrderError, MissingUserIdError
from .models import Order, OrderCreateInput
from .repository import OrderRepository

logger = logging.getLogger(__name__)

DEFAULT_GUEST_USER_ID = "guest"


class OrderIdGenerator:
    """Millisecond timestamps, bumped so that ids never repeat within a process."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            candidate = time.time_ns() // 1_000_000
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


class OrderService:
    """Encapsulates order placement and ledger queries."""

    def __init__(
        self,
        repository: OrderRepository,
        *,
        guest_user_id: str = DEFAULT_GUEST_USER_ID,
        id_generator: OrderIdGenerator | None = None,
    ) -> None:
        self._repository = repository
        self._guest_user_id = guest_user_id
        self._next_id = id_generator or OrderIdGenerator()

    async def place_order(self, payload: OrderCreateInput) -> Order:
        if not payload.items:
            raise EmptyOrderError("Order must contain at least one item")

        user_id = (payload.user_id or "").strip() or self._guest_user_id
        total = payload.total
        if total is None:
            total = sum(item.subtotal for item in payload.items)

        order = Order(
            id=self._next_id(),
            user_id=user_id,
            shipping_address=dict(payload.shipping_address),
            items=list(payload.items),
            total=total,
            created_at=datetime.now(timezone.utc),
            payment_method=payload.payment_method,
            cash_collected=payload.cash_collected,
            images=list(payload.images),
        )
        await self._repository.append(order)
        logger.info("Order %s placed by %s (%d items)", order.id, order.user_id, len(order.items))
        return order

    async def list_orders(self) -> Sequence[Order]:
        return await self._repository.list_all()

    async def list_orders_for_user(self, user_id: str) -> Sequence[Order]:
        """Orders owned by ``user_id``.

        The guest id is a demo/anonymous session and sees every order in the
        ledger, not only those placed without a user.
        """
        user_id = (user_id or "").strip()
        if not user_id:
            raise MissingUserIdError("User id is required")
        if user_id == self._guest_user_id:
            return await self._repository.list_all()
        return await self._repository.list_by_user(user_id)
