"""Development middleware — serve template documents raw, ahead of routing.

The scraped template documents are not well-formed enough for any HTML-aware
processing, so in development every ``**/templates/**.html`` request is
answered straight from disk through ``StaticTemplateResource``.

Litestar only runs route-level middleware once a route has matched, so this
one wraps the application's ASGI handler instead (see ``wrap``). It then sees
every request, including nested ``/templates/`` paths with no route of their
own.
"""

from __future__ import annotations

from litestar import Litestar
from litestar.middleware import MiddlewareProtocol
from litestar.response.base import ASGIResponse
from litestar.types import ASGIApp, Receive, Scope, Send

from invite_gallery.resources.static_template import (
    StaticTemplateResource,
    is_template_request,
)

_INTERCEPTED_METHODS = {"GET", "HEAD"}
# Catalog lookups such as /api/templates/title/<title>.html belong to the API.
_PASSTHROUGH_PREFIXES = ("/api/",)


class RawTemplateMiddleware(MiddlewareProtocol):
    """Intercept template document requests and answer them via ``serve()``."""

    def __init__(self, app: ASGIApp, resource: StaticTemplateResource) -> None:
        self.app = app
        self._resource = resource

    @classmethod
    def wrap(cls, app: Litestar, resource: StaticTemplateResource) -> Litestar:
        """Install the middleware in front of ``app``'s router."""
        app.asgi_handler = cls(app.asgi_handler, resource)
        return app

    @staticmethod
    def intercepts(scope: Scope) -> bool:
        """True for GET/HEAD HTTP requests for a template document."""
        if scope["type"] != "http":
            return False
        path = scope["path"]
        return (
            scope.get("method", "GET") in _INTERCEPTED_METHODS
            and not path.startswith(_PASSTHROUGH_PREFIXES)
            and is_template_request(path)
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not self.intercepts(scope):
            await self.app(scope, receive, send)
            return
        result = await self._resource.serve(scope["path"])
        is_head = scope.get("method") == "HEAD"
        response = ASGIResponse(
            body=b"" if is_head else result.body,
            status_code=result.status,
            media_type=result.media_type,
            headers=result.headers,
            is_head_response=is_head,
        )
        await response(scope, receive, send)
