"""Template records and the data.json payload."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class Template(BaseModel):
    """One pre-rendered invitation document and its preview image."""

    id: int
    title: str
    url: str
    image: str
    style: str | None = None
    category: str | None = None
    color: str | None = None


class TemplateData(BaseModel):
    """Shape of data.json: ``{"templates": [...]}``."""

    templates: list[Template]


class LoadState(str, Enum):
    """Lifecycle of the in-memory template store."""

    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class TemplatePage:
    """One page slice of the store plus the full count."""

    templates: list[Template]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    @property
    def has_more(self) -> bool:
        """True if records exist after this slice."""
        offset = (self.page - 1) * self.page_size
        return offset + len(self.templates) < self.total
