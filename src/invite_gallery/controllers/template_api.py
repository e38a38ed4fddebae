"""Template API controller — fallback route for raw template documents."""

from __future__ import annotations

from litestar import Controller, get
from litestar.response import Response

from invite_gallery.resources.static_template import StaticTemplateResource


class TemplateApiController(Controller):
    """HTTP adapter for ``StaticTemplateResource.serve``.

    Usage: ``GET /api/template?url=/templates/T01/index.html``. Methods other
    than GET are answered with 405 by the router.
    """

    path = "/api"

    @get("/template")
    async def template(
        self,
        static_templates: StaticTemplateResource,
        url: str | None = None,
    ) -> Response[bytes]:
        """Serve one template document from the public directory."""
        result = await static_templates.serve(url)
        return Response(
            content=result.body,
            status_code=result.status,
            media_type=result.media_type,
            headers=result.headers,
        )
