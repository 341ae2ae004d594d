"""Catalog and upload signing dependency providers."""

from fastapi import Depends

from storefront.core.container import ApplicationContainer
from storefront.modules.catalog import CatalogService
from storefront.modules.uploads import UploadSigner

from .container import get_app_container


def get_catalog_service(container: ApplicationContainer = Depends(get_app_container)) -> CatalogService:
    return CatalogService(container.asset_store, container.settings.catalog)


def get_upload_signer(container: ApplicationContainer = Depends(get_app_container)) -> UploadSigner:
    return UploadSigner(container.settings.cloudinary)


__all__ = [
    "get_catalog_service",
    "get_upload_signer",
]
