"""Upload signature endpoint for direct browser uploads."""
from typing import Optional

from fastapi import APIRouter, Depends

from storefront.interfaces.http.deps import get_upload_signer
from storefront.modules.uploads import UploadSigner
from storefront.schemas import SignatureResponse

router = APIRouter()


@router.get("/signature", response_model=SignatureResponse, summary="Sign upload parameters")
async def get_signature(
    folder: Optional[str] = None,
    public_id: Optional[str] = None,
    context: Optional[str] = None,
    type: Optional[str] = None,
    signer: UploadSigner = Depends(get_upload_signer),
) -> SignatureResponse:
    signed = signer.sign_upload(folder=folder, public_id=public_id, context=context, type=type)
    return SignatureResponse.from_domain(signed)
