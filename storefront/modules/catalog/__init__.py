"""Catalog aggregation over the managed asset store."""

from .exceptions import AssetStoreError, CatalogError, PaginationError
from .models import CatalogAsset, CatalogSnapshot, SearchPage
from .pagination import SearchPager
from .service import CatalogService
from .store import AssetStore

__all__ = [
    "AssetStore",
    "AssetStoreError",
    "CatalogAsset",
    "CatalogError",
    "CatalogService",
    "CatalogSnapshot",
    "PaginationError",
    "SearchPage",
    "SearchPager",
]
