"""Tests for the HTTP and file template sources."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from invite_gallery.clients.template_source import (
    FileTemplateSource,
    HttpTemplateSource,
    TemplateLoadError,
)
from tests.conftest import TEMPLATE_RECORDS

_HTTPX_CLIENT = "invite_gallery.clients.template_source.httpx.AsyncClient"
_BODY = json.dumps({"templates": TEMPLATE_RECORDS}).encode()


def _mock_client(response: MagicMock | None = None, error: Exception | None = None) -> AsyncMock:
    mock_client = AsyncMock()
    if error is not None:
        mock_client.get.side_effect = error
    else:
        mock_client.get.return_value = response
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def _response(status_code: int = 200, content: bytes = _BODY, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.content = content
    response.reason_phrase = reason
    return response


@pytest.fixture()
def http_source() -> HttpTemplateSource:
    return HttpTemplateSource("http://gallery.test/data.json")


# --- HttpTemplateSource ---


@pytest.mark.asyncio
async def test_http_fetch_success(http_source: HttpTemplateSource) -> None:
    """A 200 response is parsed into templates in document order."""
    mock_client = _mock_client(_response())
    with patch(_HTTPX_CLIENT, return_value=mock_client):
        templates = await http_source.fetch()
    assert [t.id for t in templates] == [1, 2, 3]
    assert templates[0].style == "Classic"
    mock_client.get.assert_awaited_once_with("http://gallery.test/data.json")


@pytest.mark.asyncio
async def test_http_fetch_status_failure(http_source: HttpTemplateSource) -> None:
    """A non-2xx response raises TemplateLoadError with the reason phrase."""
    mock_client = _mock_client(_response(404, b"", "Not Found"))
    with (
        patch(_HTTPX_CLIENT, return_value=mock_client),
        pytest.raises(TemplateLoadError, match="Failed to load templates: Not Found"),
    ):
        await http_source.fetch()


@pytest.mark.asyncio
async def test_http_fetch_network_error(http_source: HttpTemplateSource) -> None:
    """Transport errors surface as TemplateLoadError."""
    mock_client = _mock_client(error=httpx.ConnectError("Network error"))
    with (
        patch(_HTTPX_CLIENT, return_value=mock_client),
        pytest.raises(TemplateLoadError, match="Network error"),
    ):
        await http_source.fetch()


@pytest.mark.asyncio
async def test_http_fetch_malformed_json(http_source: HttpTemplateSource) -> None:
    """An unparseable body surfaces as TemplateLoadError."""
    mock_client = _mock_client(_response(content=b"<html>not json</html>"))
    with (
        patch(_HTTPX_CLIENT, return_value=mock_client),
        pytest.raises(TemplateLoadError, match="Invalid template data"),
    ):
        await http_source.fetch()


@pytest.mark.asyncio
async def test_http_fetch_wrong_shape(http_source: HttpTemplateSource) -> None:
    """A record missing required fields is rejected."""
    body = json.dumps({"templates": [{"id": 1, "title": "T01"}]}).encode()
    mock_client = _mock_client(_response(content=body))
    with (
        patch(_HTTPX_CLIENT, return_value=mock_client),
        pytest.raises(TemplateLoadError),
    ):
        await http_source.fetch()


# --- FileTemplateSource ---


@pytest.mark.asyncio
async def test_file_fetch_success(public_dir: Path) -> None:
    source = FileTemplateSource(public_dir / "data.json")
    templates = await source.fetch()
    assert [t.title for t in templates] == ["T01", "T02", "Rustic Garden"]


@pytest.mark.asyncio
async def test_file_fetch_missing(tmp_path: Path) -> None:
    source = FileTemplateSource(tmp_path / "missing.json")
    with pytest.raises(TemplateLoadError, match="Failed to load templates"):
        await source.fetch()


@pytest.mark.asyncio
async def test_file_fetch_ignores_extra_keys(tmp_path: Path) -> None:
    """Unknown keys in records are ignored."""
    path = tmp_path / "data.json"
    record = {"id": 9, "title": "X", "url": "/templates/x.html", "image": "", "likes": 4}
    path.write_text(json.dumps({"templates": [record]}))
    templates = await FileTemplateSource(path).fetch()
    assert templates[0].id == 9
    assert "likes" not in templates[0].model_dump()
