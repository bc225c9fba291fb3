from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .normalized import Category, Importance


class MissingDataRequest(BaseModel):
    # Left as free text so unknown tags reach the normalizer and fail there.
    document_type: str = Field(min_length=1, max_length=20)
    data: dict[str, Any] = Field(default_factory=dict)
    max_actions: int | None = Field(default=None, ge=1, le=20)


class CatalogEntry(BaseModel):
    id: str
    field: str
    category: Category
    importance: Importance
    penalty: int
    estimated_time: str
    action: str
    per_entry: bool = False


class CatalogResponse(BaseModel):
    document_type: str
    catalog_version: str
    entries: list[CatalogEntry]
