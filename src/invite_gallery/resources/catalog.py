"""Catalog resource — protocol-agnostic gallery queries over the template store."""

from __future__ import annotations

from invite_gallery.models.template import Template
from invite_gallery.services.template_service import TemplateService
from invite_gallery.utils.template_url import TemplateUrl


class TemplateNotInCatalogError(Exception):
    """Raised when a lookup by id or title finds nothing."""


class CatalogResource:
    """Paged listing, search and lookup for the gallery.

    Built once at startup with the shared TemplateService pre-wired.
    """

    def __init__(
        self,
        *,
        template_service: TemplateService,
        default_page_size: int = 6,
        max_page_size: int = 100,
    ) -> None:
        self._service = template_service
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    @property
    def max_page_size(self) -> int:
        return self._max_page_size

    async def page(
        self, page: int = 1, page_size: int | None = None,
    ) -> dict[str, object]:
        """Return one page of cards plus pagination totals.

        Raises:
            ValueError: If page or page_size is out of range.
            TemplateLoadError: If the store could not be loaded.
        """
        size = page_size if page_size is not None else self._default_page_size
        if size > self._max_page_size:
            raise ValueError(f"page_size must be <= {self._max_page_size}")
        result = await self._service.get_templates_by_page(page, size)
        return {
            "templates": [self._template_to_dict(t) for t in result.templates],
            "total": result.total,
            "page": result.page,
            "page_size": result.page_size,
            "total_pages": result.total_pages,
            "has_more": result.has_more,
        }

    async def search(self, keyword: str) -> dict[str, object]:
        """Search by title or url. A blank keyword returns no results.

        Whitespace only decides blankness; the keyword is matched as given.
        """
        if not keyword.strip():
            return {"keyword": keyword, "results": []}
        matches = await self._service.search_templates(keyword)
        return {
            "keyword": keyword,
            "results": [self._template_to_dict(t) for t in matches],
        }

    async def count(self) -> dict[str, int]:
        return {"total": await self._service.get_template_count()}

    async def by_id(self, template_id: int) -> dict[str, object]:
        """Look up one template by id.

        Raises:
            TemplateNotInCatalogError: If no template has this id.
        """
        template = await self._service.get_template_by_id(template_id)
        if template is None:
            raise TemplateNotInCatalogError(f"Template {template_id} not found")
        return self._template_to_dict(template)

    async def by_title(self, title: str) -> dict[str, object]:
        """Look up one template by title, ignoring case.

        Raises:
            TemplateNotInCatalogError: If no template has this title.
        """
        template = await self._service.get_template_by_title(title)
        if template is None:
            raise TemplateNotInCatalogError(f"Template {title!r} not found")
        return self._template_to_dict(template)

    @staticmethod
    def _template_to_dict(template: Template) -> dict[str, object]:
        """Serialize a Template with its resolved preview URLs."""
        urls = TemplateUrl.fallback_urls(template.url)
        data: dict[str, object] = template.model_dump(exclude_none=True)
        data["image_url"] = TemplateUrl.image_url(template.image)
        data["preview_url"] = urls["primary"]
        data["fallback_url"] = urls["fallback"]
        return data
