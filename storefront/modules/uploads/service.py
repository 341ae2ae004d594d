"""Signed parameters for direct client-to-store uploads."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import unquote

from cloudinary.utils import api_sign_request

from storefront.core.config import CloudinarySettings

from .exceptions import UploadSigningError

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_TYPE = "upload"


@dataclass(slots=True)
class UploadSignature:
    signature: str
    timestamp: int
    api_key: str
    cloud_name: str


class UploadSigner:
    """Signs exactly the parameters the client will submit with its upload.

    The store rejects an upload whose submitted parameters differ from the
    signed set; that rejection is never visible to this service.
    """

    def __init__(self, settings: CloudinarySettings, clock: Callable[[], float] = time.time) -> None:
        self._settings = settings
        self._clock = clock

    def build_params(
        self,
        *,
        timestamp: int,
        folder: Optional[str] = None,
        public_id: Optional[str] = None,
        context: Optional[str] = None,
        type: Optional[str] = None,
    ) -> dict[str, object]:
        params: dict[str, object] = {
            "timestamp": timestamp,
            "type": type or DEFAULT_UPLOAD_TYPE,
        }
        if folder:
            params["folder"] = folder
        if public_id:
            params["public_id"] = public_id
        if context:
            # clients send context percent-encoded in the query string
            params["context"] = unquote(context)
        return params

    def sign_upload(
        self,
        folder: Optional[str] = None,
        public_id: Optional[str] = None,
        context: Optional[str] = None,
        type: Optional[str] = None,
        *,
        timestamp: Optional[int] = None,
    ) -> UploadSignature:
        if not self._settings.api_secret:
            raise UploadSigningError("Upload signing is not configured")

        timestamp = int(self._clock()) if timestamp is None else timestamp
        params = self.build_params(
            timestamp=timestamp,
            folder=folder,
            public_id=public_id,
            context=context,
            type=type,
        )
        try:
            signature = api_sign_request(params, self._settings.api_secret)
        except (TypeError, ValueError) as exc:
            logger.error("Failed to sign upload params %s: %s", sorted(params), exc)
            raise UploadSigningError("Failed to sign upload") from exc

        return UploadSignature(
            signature=signature,
            timestamp=timestamp,
            api_key=self._settings.api_key,
            cloud_name=self._settings.cloud_name,
        )
