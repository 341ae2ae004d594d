"""Domain models for orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(slots=True)
class OrderItem:
    name: str
    price: float = 0.0
    quantity: int = 1
    image: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass(slots=True)
class Order:
    id: str
    user_id: str
    shipping_address: dict[str, Any]
    items: list[OrderItem]
    total: float
    created_at: datetime
    payment_method: Optional[str] = None
    cash_collected: Optional[bool] = None
    images: list[str] = field(default_factory=list)


@dataclass(slots=True)
class OrderCreateInput:
    items: list[OrderItem]
    user_id: Optional[str] = None
    shipping_address: dict[str, Any] = field(default_factory=dict)
    total: Optional[float] = None
    payment_method: Optional[str] = None
    cash_collected: Optional[bool] = None
    images: list[str] = field(default_factory=list)
