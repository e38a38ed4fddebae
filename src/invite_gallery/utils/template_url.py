"""URL helpers for template documents and preview images.

Templates are reachable at their literal path under the public directory
(served raw by the dev middleware or the static router). The API route is
kept as a fallback for hosts that do not serve the public tree directly.
"""

from __future__ import annotations

from urllib.parse import quote

TEMPLATE_API_PATH = "/api/template"
_PUBLIC_PREFIX = "/public/"


class TemplateUrl:
    """Static helpers that turn data.json paths into request URLs."""

    @staticmethod
    def normalize_path(path: str) -> str:
        """Return ``path`` with forward slashes, a leading ``/`` and no ``/public``.

        data.json files produced on Windows carry ``\\public\\templates\\...``.
        """
        normalized = path.replace("\\", "/")
        if not normalized.startswith("/"):
            normalized = f"/{normalized}"
        if normalized.lower().startswith(_PUBLIC_PREFIX):
            normalized = normalized[len(_PUBLIC_PREFIX) - 1:]
        return normalized

    @staticmethod
    def template_url(path: str) -> str:
        """Direct URL of a template document."""
        return TemplateUrl.normalize_path(path)

    @staticmethod
    def image_url(path: str) -> str:
        """Direct URL of a preview image."""
        return TemplateUrl.normalize_path(path)

    @staticmethod
    def template_api_url(path: str) -> str:
        """Fallback URL that routes the document through the API."""
        encoded = quote(TemplateUrl.normalize_path(path), safe="")
        return f"{TEMPLATE_API_PATH}?url={encoded}"

    @staticmethod
    def fallback_urls(path: str) -> dict[str, str]:
        """Direct URL first, API URL as fallback."""
        return {
            "primary": TemplateUrl.template_url(path),
            "fallback": TemplateUrl.template_api_url(path),
        }
