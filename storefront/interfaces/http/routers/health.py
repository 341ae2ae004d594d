from fastapi import APIRouter

from storefront import __version__
from storefront.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health() -> HealthResponse:
    return HealthResponse(version=__version__)
