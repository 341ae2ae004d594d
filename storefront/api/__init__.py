from fastapi import APIRouter

from storefront.interfaces.http.routers import auth, catalog, health, orders, uploads


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(catalog.router, tags=["catalog"])
    router.include_router(uploads.router, tags=["uploads"])
    router.include_router(auth.router, tags=["accounts"])
    router.include_router(orders.router, tags=["orders"])
    router.include_router(health.router, tags=["health"])
    return router


__all__ = [
    "create_api_router",
]
