"""Upload signing exceptions."""

from storefront.core.exceptions import UpstreamError


class UploadSigningError(UpstreamError):
    """Raised when upload parameters cannot be signed."""
