"""Catalog controller — thin HTTP adapter for CatalogResource."""

from __future__ import annotations

from typing import Annotated

from litestar import Controller, get
from litestar.exceptions import HTTPException
from litestar.params import Parameter

from invite_gallery.clients.template_source import TemplateLoadError
from invite_gallery.resources.catalog import CatalogResource, TemplateNotInCatalogError

_UNAVAILABLE = "Templates unavailable"


class CatalogController(Controller):
    """HTTP adapter for the gallery's listing, search and lookups."""

    path = "/api/templates"

    @get("/")
    async def list_templates(
        self,
        catalog: CatalogResource,
        page: Annotated[int, Parameter(ge=1)] = 1,
        page_size: Annotated[int | None, Parameter(ge=1)] = None,
    ) -> dict[str, object]:
        """One page of templates with pagination totals."""
        try:
            return await catalog.page(page, page_size)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except TemplateLoadError as error:
            raise HTTPException(status_code=503, detail=_UNAVAILABLE) from error

    @get("/search")
    async def search(
        self, catalog: CatalogResource, q: str = "",
    ) -> dict[str, object]:
        """Case-insensitive search over title and url."""
        try:
            return await catalog.search(q)
        except TemplateLoadError as error:
            raise HTTPException(status_code=503, detail=_UNAVAILABLE) from error

    @get("/count")
    async def count(self, catalog: CatalogResource) -> dict[str, int]:
        """Total number of templates."""
        try:
            return await catalog.count()
        except TemplateLoadError as error:
            raise HTTPException(status_code=503, detail=_UNAVAILABLE) from error

    @get("/{template_id:int}")
    async def get_by_id(
        self, template_id: int, catalog: CatalogResource,
    ) -> dict[str, object]:
        """A single template by id."""
        try:
            return await catalog.by_id(template_id)
        except TemplateNotInCatalogError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except TemplateLoadError as error:
            raise HTTPException(status_code=503, detail=_UNAVAILABLE) from error

    @get("/title/{title:str}")
    async def get_by_title(
        self, title: str, catalog: CatalogResource,
    ) -> dict[str, object]:
        """A single template by title, ignoring case."""
        try:
            return await catalog.by_title(title)
        except TemplateNotInCatalogError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except TemplateLoadError as error:
            raise HTTPException(status_code=503, detail=_UNAVAILABLE) from error
