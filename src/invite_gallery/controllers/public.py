"""Public data controller — the raw catalog resource the gallery loads from."""

from __future__ import annotations

from pathlib import Path

from litestar import Controller, get
from litestar.datastructures import State
from litestar.exceptions import NotFoundException
from litestar.response import File


class PublicDataController(Controller):
    """Serves ``<public_dir>/data.json`` unchanged."""

    path = "/"

    @get("/data.json", media_type="application/json")
    async def data_json(self, state: State) -> File:
        """Return data.json from the public directory."""
        data_path: Path = state.data_path
        if not data_path.is_file():
            raise NotFoundException(detail="data.json not found")
        return File(
            path=data_path,
            media_type="application/json",
            content_disposition_type="inline",
        )
