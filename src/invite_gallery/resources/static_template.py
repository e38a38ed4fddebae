"""Static template resource — protocol-agnostic file serving under a confined root.

``serve()`` is the single contract behind both the ``/api/template`` route
and the development middleware. It never touches framework types: callers
translate the returned ``ServeResult`` into their own response shape.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from urllib.parse import unquote

logger = logging.getLogger(__name__)

TEMPLATE_SEGMENT = "/templates/"
DOCUMENT_EXTENSIONS = (".html",)
CACHE_CONTROL = "public, max-age=3600"

MIME_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".htm": "text/html; charset=utf-8",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


class StaticServeError(Exception):
    """Base for failures that map onto an HTTP status."""

    status_code = 500


class TemplateValidationError(StaticServeError):
    """Raised when the requested path is missing or malformed."""

    status_code = 400


class TemplateAccessDeniedError(StaticServeError):
    """Raised when the path fails the extension or containment check."""

    status_code = 403


class TemplateNotFoundError(StaticServeError):
    """Raised when the resolved file does not exist."""

    status_code = 404


@dataclass(frozen=True)
class ServeResult:
    """Transport-neutral response."""

    status: int
    content_type: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == 200

    @property
    def media_type(self) -> str:
        """``content_type`` without parameters, for responses that add their own charset."""
        return self.content_type.split(";", 1)[0].strip()

    def json(self) -> object:
        """Decode an error body. Only valid for non-200 results."""
        return json.loads(self.body)


def is_template_request(path: str) -> bool:
    """True if ``path`` names a template document (query string ignored)."""
    path = path.split("?", 1)[0].replace("\\", "/")
    return TEMPLATE_SEGMENT in path and path.endswith(DOCUMENT_EXTENSIONS)


def content_type_for(path: Path | PurePosixPath) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


def resolve_template_path(root_dir: Path, requested_path: str | None) -> Path:
    """Map a request path onto a file path that lies under ``root_dir``.

    The path is percent-decoded once and normalized before the containment
    check, so ``..`` segments (encoded or not) and symlinks that escape the
    root are rejected.

    Raises:
        TemplateValidationError: If the path is missing or blank.
        TemplateAccessDeniedError: If the path is not a template document or
            resolves outside ``root_dir``.
    """
    if not requested_path or not requested_path.strip():
        raise TemplateValidationError("Missing or invalid url parameter")
    path = unquote(requested_path).split("?", 1)[0].replace("\\", "/")
    if not is_template_request(path):
        raise TemplateAccessDeniedError("Access denied")
    root = root_dir.resolve()
    try:
        candidate = (root / path.lstrip("/")).resolve()
    except ValueError as error:
        raise TemplateValidationError("Missing or invalid url parameter") from error
    if not candidate.is_relative_to(root):
        logger.warning("Rejected template path outside root: %r", requested_path)
        raise TemplateAccessDeniedError("Access denied")
    return candidate


def _error_result(status: int, error: str, message: str | None = None) -> ServeResult:
    payload = {"error": error}
    if message is not None:
        payload["message"] = message
    return ServeResult(
        status=status,
        content_type="application/json",
        body=json.dumps(payload).encode(),
    )


async def serve(
    root_dir: Path, requested_path: str | None, *, expose_errors: bool = False,
) -> ServeResult:
    """Serve one template document from under ``root_dir``.

    Returns a 200 result with caching and nosniff headers, or an error result
    (400/403/404/500) with a JSON body. I/O error detail is only included
    when ``expose_errors`` is set.
    """
    try:
        path = resolve_template_path(root_dir, requested_path)
        if not path.is_file():
            raise TemplateNotFoundError("Template not found")
        body = await asyncio.to_thread(path.read_bytes)
    except StaticServeError as error:
        return _error_result(error.status_code, str(error))
    except OSError as error:
        logger.error("Error serving template %r: %s", requested_path, error)
        return _error_result(
            500, "Internal server error", str(error) if expose_errors else None,
        )
    return ServeResult(
        status=200,
        content_type=content_type_for(path),
        body=body,
        headers={
            "Cache-Control": CACHE_CONTROL,
            "X-Content-Type-Options": "nosniff",
            "Access-Control-Allow-Origin": "*",
        },
    )


class StaticTemplateResource:
    """Template file serving bound to one public directory.

    Built once at startup and shared by the API route and the dev middleware.
    """

    def __init__(self, *, root_dir: Path, expose_errors: bool = False) -> None:
        self._root_dir = root_dir
        self._expose_errors = expose_errors

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    async def serve(self, requested_path: str | None) -> ServeResult:
        """Serve ``requested_path`` from this resource's root."""
        return await serve(
            self._root_dir, requested_path, expose_errors=self._expose_errors,
        )
