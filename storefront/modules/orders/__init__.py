"""Order ledger services and models."""

from .exceptions import EmptyOrderError, MissingUserIdError, OrderError
from .models import Order, OrderCreateInput, OrderItem
from .repository import InMemoryOrderRepository, OrderRepository
from .service import DEFAULT_GUEST_USER_ID, OrderIdGenerator, OrderService

__all__ = [
    "DEFAULT_GUEST_USER_ID",
    "EmptyOrderError",
    "InMemoryOrderRepository",
    "MissingUserIdError",
    "Order",
    "OrderCreateInput",
    "OrderError",
    "OrderIdGenerator",
    "OrderItem",
    "OrderRepository",
    "OrderService",
]
