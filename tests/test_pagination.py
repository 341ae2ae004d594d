"""Cursor-driven search pagination."""

import pytest

from storefront.modules.catalog import PaginationError, SearchPage, SearchPager

from tests.fakes import ScriptedPageStore


def _pages(count: int, per_page: int = 3) -> list[SearchPage]:
    pages = []
    for index in range(count):
        resources = [{"public_id": f"Radha/p{index}-{item}"} for item in range(per_page)]
        cursor = f"cursor-{index + 1}" if index < count - 1 else None
        pages.append(SearchPage(resources=resources, next_cursor=cursor))
    return pages


class TestSearchPager:
    async def test_stops_after_page_without_cursor(self):
        store = ScriptedPageStore(_pages(4))
        pager = SearchPager(store, "folder:Radha/*", page_size=3)

        resources = await pager.collect()

        assert len(resources) == 12
        assert len({r["public_id"] for r in resources}) == 12
        assert store.cursors == [None, "cursor-1", "cursor-2", "cursor-3"]

    async def test_single_page(self):
        store = ScriptedPageStore(_pages(1))

        pages = [page async for page in SearchPager(store, "folder:Radha/*")]

        assert len(pages) == 1
        assert store.cursors == [None]

    async def test_empty_cursor_string_ends_scan(self):
        store = ScriptedPageStore([SearchPage(resources=[{"public_id": "Radha/a"}], next_cursor="")])

        assert len(await SearchPager(store, "folder:Radha/*").collect()) == 1

    async def test_restarts_from_first_page(self):
        store = ScriptedPageStore(_pages(2))
        pager = SearchPager(store, "folder:Radha/*")

        first = await pager.collect()
        second = await pager.collect()

        assert first == second
        assert store.cursors == [None, "cursor-1", None, "cursor-1"]

    async def test_is_lazy(self):
        store = ScriptedPageStore(_pages(3))

        async for _ in SearchPager(store, "folder:Radha/*"):
            break

        assert store.cursors == [None]

    async def test_repeated_cursor_is_an_error(self):
        looping = [
            SearchPage(resources=[{"public_id": "Radha/a"}], next_cursor="cursor-1"),
            SearchPage(resources=[{"public_id": "Radha/b"}], next_cursor="cursor-1"),
        ]

        with pytest.raises(PaginationError):
            await SearchPager(ScriptedPageStore(looping), "folder:Radha/*").collect()
