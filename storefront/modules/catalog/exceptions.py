"""Catalog domain specific exceptions."""

from storefront.core.exceptions import UpstreamError


class CatalogError(UpstreamError):
    """Base class for catalog aggregation failures."""


class AssetStoreError(CatalogError):
    """Raised when the asset store rejects a call, fails or times out."""


class PaginationError(CatalogError):
    """Raised when the asset store hands back a cursor that does not advance."""
