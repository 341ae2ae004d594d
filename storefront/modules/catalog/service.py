"""Catalog aggregation over the asset store."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from storefront.core.config import CatalogSettings

from .models import CatalogAsset, CatalogSnapshot
from .pagination import SearchPager
from .store import AssetStore, folder_equals, folder_prefix

logger = logging.getLogger(__name__)


class CatalogService:
    """Builds the storefront catalog from folders under a fixed root."""

    def __init__(self, store: AssetStore, settings: CatalogSettings) -> None:
        self._store = store
        self._settings = settings
        self._root = settings.root_folder.strip("/")

    async def fetch_catalog(self) -> CatalogSnapshot:
        """Category-keyed snapshot of every folder under the root.

        Subfolder searches run concurrently; root-level assets are stored
        under the root folder name with the root category on each asset.
        Any store failure propagates and no partial snapshot is returned.
        """
        folders = await self._discover_folders()
        logger.info("Found %d folders under %s", len(folders), self._root)

        semaphore = asyncio.Semaphore(self._settings.max_concurrency)

        async def _bounded(path: str) -> list[CatalogAsset]:
            async with semaphore:
                return await self._search_folder(path)

        results = await asyncio.gather(*(_bounded(path) for path in folders))

        catalog: CatalogSnapshot = {}
        for path, assets in zip(folders, results):
            catalog[self.category_for_folder(path)] = assets

        root_assets = await self._search_root()
        if root_assets:
            if self._root in catalog:
                logger.warning(
                    "Subfolder %s/%s shares the root name; its assets and root assets share one key",
                    self._root,
                    self._root,
                )
            catalog.setdefault(self._root, []).extend(root_assets)

        logger.info(
            "Catalog assembled: %d categories, %d assets",
            len(catalog),
            sum(len(assets) for assets in catalog.values()),
        )
        return catalog

    async def fetch_all_images_recursive(self) -> list[CatalogAsset]:
        """Flat list of every asset under the root, ordered by public id."""
        pager = SearchPager(
            self._store,
            folder_prefix(self._root),
            page_size=self._settings.scan_page_size,
        )
        prefix = f"{self._root}/"
        assets: list[CatalogAsset] = []
        async for resource in pager.resources():
            public_id = str(resource.get("public_id", ""))
            # the prefix wildcard may also match sibling folders sharing the root's name
            if not public_id.startswith(prefix):
                continue
            assets.append(self.to_asset(resource, self.category_for_public_id(public_id)))
        logger.info("Scanned %d assets under %s", len(assets), self._root)
        return assets

    async def _discover_folders(self) -> list[str]:
        """Subfolder paths under the root, breadth-first up to the configured depth."""
        discovered: list[str] = []
        frontier = [self._root]
        for _ in range(self._settings.folder_depth):
            children: list[str] = []
            for parent in frontier:
                children.extend(await self._store.list_subfolders(parent))
            if not children:
                break
            discovered.extend(children)
            frontier = children
        return discovered

    async def _search_folder(self, path: str) -> list[CatalogAsset]:
        page = await self._store.search(
            folder_equals(path),
            max_results=self._settings.page_size,
            sort_by=("public_id", "asc"),
        )
        if page.next_cursor:
            logger.warning(
                "Folder %s holds more than %d assets; extra results are not shown",
                path,
                self._settings.page_size,
            )
        category = self.category_for_folder(path)
        return [self.to_asset(resource, category) for resource in page.resources]

    async def _search_root(self) -> list[CatalogAsset]:
        expression = f"{folder_equals(self._root)} AND NOT {folder_prefix(self._root)}"
        page = await self._store.search(
            expression,
            max_results=self._settings.page_size,
            sort_by=("public_id", "asc"),
        )
        return [self.to_asset(resource, self._settings.root_category) for resource in page.resources]

    def category_for_folder(self, path: str) -> str:
        path = path.strip("/")
        prefix = f"{self._root}/"
        if path.startswith(prefix):
            return path[len(prefix):]
        return path

    def category_for_public_id(self, public_id: str) -> str:
        relative = public_id[len(self._root) + 1:] if public_id.startswith(f"{self._root}/") else public_id
        if "/" not in relative:
            return self._settings.root_category
        return relative.rsplit("/", 1)[0]

    @staticmethod
    def to_asset(resource: Mapping[str, Any], category: str) -> CatalogAsset:
        return CatalogAsset(
            asset_id=str(resource.get("asset_id") or resource.get("public_id", "")),
            public_id=str(resource.get("public_id", "")),
            secure_url=str(resource.get("secure_url") or resource.get("url") or ""),
            category=category,
            context=_flatten_context(resource.get("context")),
            created_at=_parse_timestamp(resource.get("created_at")),
            width=resource.get("width"),
            height=resource.get("height"),
            format=resource.get("format"),
        )


def _flatten_context(context: Any) -> dict[str, str]:
    # the admin API nests custom context under "custom", search returns it flat
    if not isinstance(context, Mapping):
        return {}
    custom = context.get("custom")
    if isinstance(custom, Mapping):
        context = custom
    return {str(key): str(value) for key, value in context.items()}


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable created_at %r", value)
        return None
