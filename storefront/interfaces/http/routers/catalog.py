"""Storefront catalog endpoints backed by the asset store."""
from fastapi import APIRouter, Depends

from storefront.interfaces.http.deps import get_catalog_service
from storefront.modules.catalog import CatalogService
from storefront.schemas import AssetResponse

router = APIRouter()


@router.get("/getImages", response_model=dict[str, list[AssetResponse]], summary="Category-keyed catalog")
async def get_images(service: CatalogService = Depends(get_catalog_service)) -> dict[str, list[AssetResponse]]:
    catalog = await service.fetch_catalog()
    return {
        category: [AssetResponse.from_domain(asset) for asset in assets]
        for category, assets in catalog.items()
    }


@router.get("/getCloudImages", response_model=list[AssetResponse], summary="Every asset under the root folder")
async def get_cloud_images(service: CatalogService = Depends(get_catalog_service)) -> list[AssetResponse]:
    assets = await service.fetch_all_images_recursive()
    return [AssetResponse.from_domain(asset) for asset in assets]
