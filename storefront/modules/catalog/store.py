"""Asset store protocol consumed by the catalog services."""

from __future__ import annotations

from typing import Optional, Protocol

from .models import SearchPage


class AssetStore(Protocol):
    """Read-side view of the managed asset host."""

    async def list_subfolders(self, path: str) -> list[str]:
        """Full paths of the immediate children of ``path``."""
        ...

    async def search(
        self,
        expression: str,
        *,
        max_results: int,
        next_cursor: Optional[str] = None,
        sort_by: tuple[str, str] = ("public_id", "asc"),
        with_context: bool = True,
    ) -> SearchPage:
        ...


def quote_value(value: str) -> str:
    """Quote a value for use in a search expression."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def folder_equals(path: str) -> str:
    return f"folder={quote_value(path)}"


def folder_prefix(path: str) -> str:
    return f"folder:{path}/*"
