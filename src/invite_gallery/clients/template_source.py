"""Template data sources — where data.json is read from."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

import httpx
from pydantic import ValidationError

from invite_gallery.models.template import Template, TemplateData


class TemplateLoadError(Exception):
    """Raised when the template data resource cannot be fetched or parsed."""


class TemplateSource(ABC):
    """Produces the ordered template records of one data.json document."""

    @abstractmethod
    async def fetch(self) -> list[Template]:
        """Fetch and parse the data resource.

        Raises:
            TemplateLoadError: On any transport, read or parse failure.
        """

    @staticmethod
    def parse(raw: str | bytes) -> list[Template]:
        """Parse a data.json body into template records."""
        try:
            return TemplateData.model_validate_json(raw).templates
        except ValidationError as error:
            raise TemplateLoadError(f"Invalid template data: {error}") from error


class HttpTemplateSource(TemplateSource):
    """Fetch data.json over HTTP. Built once at startup, one request per fetch."""

    def __init__(self, url: str, *, timeout: float | None = 10.0) -> None:
        self._url = url
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> list[Template]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as http_client:
                response = await http_client.get(self._url)
        except httpx.HTTPError as error:
            raise TemplateLoadError(
                f"Failed to load templates: {error}"
            ) from error
        if not response.is_success:
            raise TemplateLoadError(
                f"Failed to load templates: {response.reason_phrase}"
            )
        return self.parse(response.content)


class FileTemplateSource(TemplateSource):
    """Read data.json from the local public directory."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    async def fetch(self) -> list[Template]:
        try:
            raw = await asyncio.to_thread(self._path.read_bytes)
        except OSError as error:
            raise TemplateLoadError(
                f"Failed to load templates: {error}"
            ) from error
        return self.parse(raw)
