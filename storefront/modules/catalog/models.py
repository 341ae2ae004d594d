"""Domain models for catalog assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class CatalogAsset:
    asset_id: str
    public_id: str
    secure_url: str
    category: str
    context: dict[str, str] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None

    @property
    def name(self) -> str:
        return self.public_id.rsplit("/", 1)[-1]

    @property
    def description(self) -> str:
        return self.context.get("description", "")

    @property
    def price(self) -> str:
        return self.context.get("price", "")


@dataclass(slots=True)
class SearchPage:
    resources: list[Mapping[str, Any]]
    next_cursor: Optional[str] = None


CatalogSnapshot = dict[str, list[CatalogAsset]]
