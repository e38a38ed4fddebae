"""Template loader/cache — the in-memory store behind the catalog."""

from __future__ import annotations

import asyncio
import logging

from invite_gallery.clients.template_source import TemplateLoadError, TemplateSource
from invite_gallery.models.template import LoadState, Template, TemplatePage

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 6


class TemplateService:
    """Built once at startup with its source pre-wired.

    Holds the only copy of the template store for the application. The store
    is filled by the first successful load and never mutated afterwards,
    except by ``clear_cache()``. Concurrent first-time callers share one
    in-flight fetch.
    """

    def __init__(self, source: TemplateSource) -> None:
        self._source = source
        self._templates: list[Template] | None = None
        self._pending: asyncio.Task[list[Template]] | None = None

    @property
    def state(self) -> LoadState:
        """Current load state of the store."""
        if self._templates is not None:
            return LoadState.LOADED
        if self._pending is not None:
            return LoadState.LOADING
        return LoadState.EMPTY

    @property
    def is_loaded(self) -> bool:
        return self._templates is not None

    async def load_templates(self) -> list[Template]:
        """Return the store, fetching it on first use.

        Callers arriving while a fetch is in flight await that same fetch.
        A failed fetch is not remembered: the next call starts a new one.

        Raises:
            TemplateLoadError: If the in-flight fetch failed.
        """
        if self._templates is not None:
            return self._templates
        if self._pending is None:
            self._pending = asyncio.create_task(self._fetch())
        # One cancelled waiter must not cancel the fetch for the others.
        return await asyncio.shield(self._pending)

    async def _fetch(self) -> list[Template]:
        """Run one fetch and publish its result if the cache was not cleared."""
        task = asyncio.current_task()
        try:
            templates = await self._source.fetch()
        except TemplateLoadError as error:
            logger.error("Error loading templates: %s", error)
            raise
        finally:
            current = self._pending is task
            if current:
                self._pending = None
        if current:
            self._templates = templates
            logger.info("Successfully loaded %d templates", len(templates))
        return templates

    async def get_templates(self) -> list[Template]:
        """Return all templates, loading them if needed."""
        if self._templates is None:
            return await self.load_templates()
        return self._templates

    async def get_template_by_id(self, template_id: int) -> Template | None:
        """Return the first template with ``template_id``, or None."""
        templates = await self.get_templates()
        return next((t for t in templates if t.id == template_id), None)

    async def get_template_by_title(self, title: str) -> Template | None:
        """Return the template whose title matches ignoring case, or None."""
        templates = await self.get_templates()
        wanted = title.lower()
        return next((t for t in templates if t.title.lower() == wanted), None)

    async def search_templates(self, keyword: str) -> list[Template]:
        """Templates whose title or url contains ``keyword``, ignoring case."""
        templates = await self.get_templates()
        needle = keyword.lower()
        return [
            t for t in templates
            if needle in t.title.lower() or needle in t.url.lower()
        ]

    async def get_template_count(self) -> int:
        templates = await self.get_templates()
        return len(templates)

    async def get_templates_by_page(
        self, page: int, page_size: int = DEFAULT_PAGE_SIZE,
    ) -> TemplatePage:
        """Return one 1-based page of the store.

        Pages past the end are empty; ``total`` is always the full count.

        Raises:
            ValueError: If ``page`` or ``page_size`` is below 1.
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        templates = await self.get_templates()
        start = (page - 1) * page_size
        return TemplatePage(
            templates=templates[start:start + page_size],
            total=len(templates),
            page=page,
            page_size=page_size,
        )

    async def preload(self) -> None:
        """Warm the store. Failures are logged, never raised."""
        try:
            await self.load_templates()
        except Exception as error:  # noqa: BLE001
            logger.warning("Failed to preload templates: %s", error)

    def clear_cache(self) -> None:
        """Drop the store and any pending fetch reference."""
        self._templates = None
        self._pending = None
