"""Asset store backed by the Cloudinary Admin and Search APIs.

The SDK is blocking, so every call runs on a worker thread and is bounded by
the configured timeout.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable, Optional, TypeVar

import cloudinary
import cloudinary.api
from cloudinary.exceptions import Error as CloudinaryError
from cloudinary.search import Search

from storefront.core.config import CloudinarySettings
from storefront.modules.catalog.exceptions import AssetStoreError
from storefront.modules.catalog.models import SearchPage
from storefront.modules.catalog.store import AssetStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

FOLDER_PAGE_SIZE = 500


def configure_cloudinary(settings: CloudinarySettings) -> None:
    cloudinary.config(
        cloud_name=settings.cloud_name,
        api_key=settings.api_key,
        api_secret=settings.api_secret,
        secure=True,
    )


class CloudinaryAssetStore(AssetStore):
    def __init__(self, settings: CloudinarySettings) -> None:
        self._settings = settings
        self._timeout = settings.timeout

    async def list_subfolders(self, path: str) -> list[str]:
        folders: list[str] = []
        cursor: Optional[str] = None
        while True:
            options: dict[str, Any] = {"max_results": FOLDER_PAGE_SIZE}
            if cursor:
                options["next_cursor"] = cursor
            response = await self._call(
                f"subfolders({path})",
                functools.partial(cloudinary.api.subfolders, path, **options, **self._options()),
            )
            folders.extend(
                folder.get("path") or f"{path}/{folder['name']}"
                for folder in response.get("folders", [])
            )
            cursor = response.get("next_cursor")
            if not cursor:
                return folders

    async def search(
        self,
        expression: str,
        *,
        max_results: int,
        next_cursor: Optional[str] = None,
        sort_by: tuple[str, str] = ("public_id", "asc"),
        with_context: bool = True,
    ) -> SearchPage:
        query = Search().expression(expression).sort_by(*sort_by).max_results(max_results)
        if with_context:
            query = query.with_field("context").with_field("metadata")
        if next_cursor:
            query = query.next_cursor(next_cursor)

        response = await self._call(
            f"search({expression})",
            functools.partial(query.execute, **self._options()),
        )
        return SearchPage(
            resources=list(response.get("resources", [])),
            next_cursor=response.get("next_cursor"),
        )

    def _options(self) -> dict[str, Any]:
        return {"timeout": self._timeout}

    async def _call(self, description: str, func: Callable[[], T]) -> T:
        try:
            return await asyncio.wait_for(asyncio.to_thread(func), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Cloudinary %s timed out after %ss", description, self._timeout)
            raise AssetStoreError(f"Asset store timed out during {description}") from exc
        except CloudinaryError as exc:
            logger.error("Cloudinary %s failed: %s", description, exc)
            raise AssetStoreError(f"Asset store request failed during {description}") from exc
