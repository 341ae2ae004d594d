"""Catalog aggregation against an in-process asset store."""

import logging

import pytest

from storefront.core.config import CatalogSettings
from storefront.modules.catalog import AssetStoreError, CatalogService

from tests.fakes import FakeAssetStore, make_resource


class TestFetchCatalog:
    async def test_root_and_subfolder_example(self, catalog_service):
        catalog = await catalog_service.fetch_catalog()

        assert list(catalog) == ["Krishna", "Radha"]
        assert [asset.public_id for asset in catalog["Krishna"]] == ["Radha/Krishna/flute"]
        assert [asset.category for asset in catalog["Krishna"]] == ["Krishna"]
        assert [asset.public_id for asset in catalog["Radha"]] == ["Radha/r1", "Radha/r2"]
        assert {asset.category for asset in catalog["Radha"]} == {"All"}

    async def test_metadata_is_attached(self, catalog_service):
        catalog = await catalog_service.fetch_catalog()

        flute = catalog["Krishna"][0]
        assert flute.name == "flute"
        assert flute.description == "Bamboo flute"
        assert flute.price == "25"
        assert flute.secure_url.endswith("Radha/Krishna/flute.jpg")
        assert flute.created_at is not None and flute.created_at.year == 2024
        assert (flute.width, flute.height) == (800, 600)

    async def test_assets_stay_inside_their_category_path(self):
        store = FakeAssetStore.from_public_ids(
            "Radha/Gopi/a", "Radha/Gopi/b", "Radha/Krishna/c", "Radha/Krishna/d", "Radha/top"
        )
        catalog = await CatalogService(store, CatalogSettings()).fetch_catalog()

        for assets in catalog.values():
            for asset in assets:
                if asset.category == "All":
                    assert "/" not in asset.public_id[len("Radha/"):]
                else:
                    assert asset.public_id.startswith(f"Radha/{asset.category}/")

    async def test_each_category_is_sorted_by_public_id(self):
        store = FakeAssetStore.from_public_ids("Radha/Gopi/z", "Radha/Gopi/a", "Radha/Gopi/m")
        catalog = await CatalogService(store, CatalogSettings()).fetch_catalog()

        assert [asset.name for asset in catalog["Gopi"]] == ["a", "m", "z"]

    async def test_root_category_omitted_when_root_is_empty(self):
        store = FakeAssetStore.from_public_ids("Radha/Gopi/a")
        catalog = await CatalogService(store, CatalogSettings()).fetch_catalog()

        assert list(catalog) == ["Gopi"]

    async def test_only_immediate_children_by_default(self):
        store = FakeAssetStore.from_public_ids("Radha/Gopi/a", "Radha/Gopi/Lila/b")
        catalog = await CatalogService(store, CatalogSettings()).fetch_catalog()

        assert store.folder_calls == ["Radha"]
        assert [asset.public_id for asset in catalog["Gopi"]] == ["Radha/Gopi/a"]
        assert "Gopi/Lila" not in catalog

    async def test_deeper_folders_when_depth_is_raised(self):
        store = FakeAssetStore.from_public_ids("Radha/Gopi/a", "Radha/Gopi/Lila/b")
        catalog = await CatalogService(store, CatalogSettings(folder_depth=3)).fetch_catalog()

        assert [asset.public_id for asset in catalog["Gopi/Lila"]] == ["Radha/Gopi/Lila/b"]
        assert catalog["Gopi/Lila"][0].category == "Gopi/Lila"

    async def test_fan_out_respects_concurrency_limit(self):
        store = FakeAssetStore.from_public_ids(*(f"Radha/F{i}/a" for i in range(10)))
        catalog = await CatalogService(store, CatalogSettings(max_concurrency=2)).fetch_catalog()

        assert len(catalog) == 10
        assert 1 <= store.max_in_flight <= 2

    async def test_subfolder_named_like_root_shares_the_root_key(self, caplog):
        store = FakeAssetStore.from_public_ids("Radha/Radha/x", "Radha/top")

        with caplog.at_level(logging.WARNING, logger="storefront.modules.catalog.service"):
            catalog = await CatalogService(store, CatalogSettings()).fetch_catalog()

        assert list(catalog) == ["Radha"]
        assert [(a.public_id, a.category) for a in catalog["Radha"]] == [
            ("Radha/Radha/x", "Radha"),
            ("Radha/top", "All"),
        ]
        assert "shares the root name" in caplog.text

    async def test_single_search_failure_aborts_everything(self, fake_store, catalog_service):
        fake_store.fail_on = "Radha/Krishna"

        with pytest.raises(AssetStoreError):
            await catalog_service.fetch_catalog()

    async def test_folder_listing_failure_aborts(self, fake_store, catalog_service):
        fake_store.fail_on = "folders"

        with pytest.raises(AssetStoreError):
            await catalog_service.fetch_catalog()


class TestFetchAllImagesRecursive:
    async def test_scan_matches_catalog_union_for_shallow_tree(self, catalog_service):
        catalog = await catalog_service.fetch_catalog()
        flat = await catalog_service.fetch_all_images_recursive()

        from_catalog = {asset.public_id for assets in catalog.values() for asset in assets}
        assert {asset.public_id for asset in flat} == from_catalog

    async def test_scan_pages_through_every_asset_in_order(self):
        public_ids = [f"Radha/Gopi/img{i:03d}" for i in range(250)]
        store = FakeAssetStore.from_public_ids(*reversed(public_ids))

        assets = await CatalogService(store, CatalogSettings()).fetch_all_images_recursive()

        assert [asset.public_id for asset in assets] == public_ids
        assert [cursor for _, cursor in store.search_calls] == [None, "cursor-100", "cursor-200"]

    async def test_scan_drops_sibling_folders_matched_by_wildcard(self):
        store = FakeAssetStore.from_public_ids("Radha/a", "Radha2/b", "Radhai/c", loose_prefix=True)

        assets = await CatalogService(store, CatalogSettings()).fetch_all_images_recursive()

        assert [asset.public_id for asset in assets] == ["Radha/a"]

    async def test_scan_derives_categories_from_public_ids(self):
        store = FakeAssetStore.from_public_ids("Radha/a", "Radha/Gopi/b", "Radha/Gopi/Lila/c")

        assets = await CatalogService(store, CatalogSettings()).fetch_all_images_recursive()

        assert [asset.category for asset in assets] == ["Gopi/Lila", "Gopi", "All"]


class TestResourceMapping:
    def test_flat_context_is_accepted(self):
        resource = make_resource("Radha/a")
        resource["context"] = {"price": "5", "description": "Plain"}

        asset = CatalogService.to_asset(resource, "All")

        assert (asset.price, asset.description) == ("5", "Plain")

    def test_missing_optional_fields(self):
        asset = CatalogService.to_asset({"public_id": "Radha/a", "url": "http://x/a.jpg"}, "All")

        assert asset.asset_id == "Radha/a"
        assert asset.secure_url == "http://x/a.jpg"
        assert asset.context == {}
        assert asset.created_at is None
        assert asset.price == ""

    def test_category_for_folder_strips_root(self, catalog_service):
        assert catalog_service.category_for_folder("Radha/Krishna") == "Krishna"
        assert catalog_service.category_for_folder("Radha/Krishna/Lila/") == "Krishna/Lila"

