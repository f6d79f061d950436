"""Shared test fixtures for Wikiplum."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from wikiplum.config import Settings
from wikiplum.main import create_app
from wikiplum.services.source_service import create_page_source

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    import httpx

BASE_TEMPLATE = """\
<html><head><title>{% block title %}{% endblock %}</title>
<link rel="stylesheet" href="{{ page.rel }}/static/style.css"></head>
<body><nav>{% for item in page.sidebar %}<a href="{{ item.link }}">{{ item.title }}</a>
{% endfor %}</nav>
<main>{% block content %}{% endblock %}</main></body></html>
"""

PAGE_TEMPLATE = """\
{% extends "base.html" %}
{% block title %}{{ page.title }}{% endblock %}
{% block content %}{{ page.html }}{% endblock %}
"""


@asynccontextmanager
async def create_test_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncGenerator[AsyncClient]:
    """Create an HTTP test client with a fully initialized app.

    Manually performs the work of the application lifespan (page source
    setup) because ASGITransport does not trigger it.  *transport* replaces
    the network for the remote page source.
    """
    app = create_app(settings)
    page_source = create_page_source(settings, transport=transport)
    app.state.page_source = page_source

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    await page_source.aclose()


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site checkout with templates, an empty content tree and static/."""
    site = tmp_path / "site"
    (site / "content").mkdir(parents=True)
    (site / "static").mkdir()
    templates = site / "templates"
    templates.mkdir()
    (templates / "base.html").write_text(BASE_TEMPLATE)
    (templates / "page.html").write_text(PAGE_TEMPLATE)
    return site


@pytest.fixture
def tmp_content_dir(site_dir: Path) -> Path:
    """The content directory of the temporary site."""
    return site_dir / "content"


@pytest.fixture
def test_settings(site_dir: Path) -> Settings:
    """Create test settings pointing at the temporary site."""
    return Settings(
        _env_file=None,
        debug=True,
        content_dir=site_dir / "content",
        build_dir=site_dir / "build",
        templates_dir=site_dir / "templates",
        static_dir=site_dir / "static",
    )


def write_file(root: Path, rel_path: str, content: str | bytes = "") -> Path:
    """Write *content* to ``root/rel_path``, creating parent directories."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path
