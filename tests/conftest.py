"""Shared fixtures for invite_gallery tests."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from litestar.testing import TestClient

from invite_gallery.app import create_app
from invite_gallery.config import Settings

TEMPLATE_RECORDS = [
    {
        "id": 1,
        "title": "T01",
        "url": "/templates/T01/index.html",
        "image": "/images/T01.png",
        "style": "Classic",
    },
    {
        "id": 2,
        "title": "T02",
        "url": "/templates/T02/index.html",
        "image": "/images/T02.png",
    },
    {
        "id": 3,
        "title": "Rustic Garden",
        "url": "\\public\\templates\\T03\\index.html",
        "image": "\\public\\images\\T03.png",
        "category": "outdoor",
    },
]


def write_public_tree(root: Path, records: list[dict[str, object]] | None = None) -> Path:
    """Build a public/ directory with data.json, template documents and images."""
    public = root / "public"
    for code in ("T01", "T02", "T03"):
        folder = public / "templates" / code
        folder.mkdir(parents=True)
        (folder / "index.html").write_text(f"<html><h1>{code}</h1></html>")
    (public / "templates" / "T01" / "style.css").write_text("h1 { color: red; }")
    (public / "images").mkdir()
    (public / "images" / "T01.png").write_bytes(b"\x89PNG\r\n")
    (public / "secret.html").write_text("<p>not a template</p>")
    (root / "outside.html").write_text("<p>outside the public root</p>")
    payload = {"templates": records if records is not None else TEMPLATE_RECORDS}
    (public / "data.json").write_text(json.dumps(payload))
    return public


@pytest.fixture()
def public_dir(tmp_path: Path) -> Path:
    """A public directory populated with three templates."""
    return write_public_tree(tmp_path)


@pytest.fixture()
def settings(public_dir: Path) -> Settings:
    """Development settings reading data.json from the fixture tree."""
    return Settings(
        environment="development",
        public_dir=public_dir,
        data_url="",
        preload_on_startup=True,
    )


@pytest.fixture()
def production_settings(public_dir: Path) -> Settings:
    """Production settings over the same fixture tree."""
    return Settings(
        environment="production",
        public_dir=public_dir,
        data_url="",
        preload_on_startup=True,
    )


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:  # type: ignore[type-arg]
    """Test client wired to the development app with lifespan managed."""
    with TestClient(app=create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def production_client(production_settings: Settings) -> Iterator[TestClient]:  # type: ignore[type-arg]
    """Test client wired to the production app with lifespan managed."""
    with TestClient(app=create_app(production_settings)) as test_client:
        yield test_client
