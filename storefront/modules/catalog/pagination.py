"""Cursor-driven iteration over asset store search results."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any, Mapping, Optional

from .exceptions import PaginationError
from .models import SearchPage
from .store import AssetStore

logger = logging.getLogger(__name__)


class SearchPager:
    """Lazy, restartable sequence of search pages.

    Each ``async for`` starts a fresh scan from the first page and requests
    the next page with the cursor of the previous one. Iteration ends on the
    first page that comes back without a cursor.
    """

    def __init__(
        self,
        store: AssetStore,
        expression: str,
        *,
        page_size: int = 100,
        sort_by: tuple[str, str] = ("public_id", "asc"),
        with_context: bool = True,
    ) -> None:
        self._store = store
        self._expression = expression
        self._page_size = page_size
        self._sort_by = sort_by
        self._with_context = with_context

    def __aiter__(self) -> AsyncIterator[SearchPage]:
        return self._pages()

    async def _pages(self) -> AsyncIterator[SearchPage]:
        cursor: Optional[str] = None
        seen: set[str] = set()
        fetched = 0
        while True:
            page = await self._store.search(
                self._expression,
                max_results=self._page_size,
                next_cursor=cursor,
                sort_by=self._sort_by,
                with_context=self._with_context,
            )
            fetched += 1
            logger.debug(
                "Fetched page %d for %s (%d resources)", fetched, self._expression, len(page.resources)
            )
            yield page

            cursor = page.next_cursor or None
            if cursor is None:
                return
            if cursor in seen:
                raise PaginationError(f"Asset store repeated cursor for {self._expression}")
            seen.add(cursor)

    async def resources(self) -> AsyncIterator[Mapping[str, Any]]:
        async for page in self:
            for resource in page.resources:
                yield resource

    async def collect(self) -> list[Mapping[str, Any]]:
        return [resource async for resource in self.resources()]
