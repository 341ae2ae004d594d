"""Simple dependency container for wiring process-wide services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from storefront.core.config import Settings, get_settings
from storefront.infrastructure.cloudinary import CloudinaryAssetStore, configure_cloudinary
from storefront.modules.catalog import AssetStore
from storefront.modules.orders import InMemoryOrderRepository, OrderIdGenerator


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    asset_store: AssetStore
    order_ledger: InMemoryOrderRepository = field(default_factory=InMemoryOrderRepository)
    order_ids: OrderIdGenerator = field(default_factory=OrderIdGenerator)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        configure_cloudinary(settings.cloudinary)
        return cls(settings=settings, asset_store=CloudinaryAssetStore(settings.cloudinary))


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer.from_settings(get_settings())


__all__ = ["ApplicationContainer", "get_container"]
