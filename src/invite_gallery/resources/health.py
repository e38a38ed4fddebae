"""Health resource — protocol-agnostic health check logic."""

from __future__ import annotations

from invite_gallery.services.template_service import TemplateService


class HealthResource:
    """Health check operations."""

    def __init__(self, *, template_service: TemplateService) -> None:
        self._service = template_service

    def check(self) -> dict[str, str]:
        """Return server health status and the template store's load state."""
        return {"status": "ok", "templates": self._service.state.value}
