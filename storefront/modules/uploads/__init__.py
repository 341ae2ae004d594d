"""Upload authorization."""

from .exceptions import UploadSigningError
from .service import DEFAULT_UPLOAD_TYPE, UploadSignature, UploadSigner

__all__ = [
    "DEFAULT_UPLOAD_TYPE",
    "UploadSignature",
    "UploadSigner",
    "UploadSigningError",
]
