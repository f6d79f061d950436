"""Site service: renders the content tree into the build tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from wikiplum.exceptions import TemplateLoadError
from wikiplum.filesystem.content_tree import (
    MARKDOWN_SUFFIX,
    is_markdown,
    output_path,
    root_prefix,
    walk_files,
)
from wikiplum.filesystem.frontmatter import parse_frontmatter
from wikiplum.rendering.renderer import render_markdown
from wikiplum.services.sidebar_service import NavItem, build_sidebar

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Template

    from wikiplum.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """Everything the page template needs to render one wiki page."""

    title: str
    html: Markup
    sidebar: tuple[NavItem, ...]
    rel: str
    meta: dict[str, str] = field(default_factory=dict)


def load_templates(settings: Settings) -> Template:
    """Load the page template, which extends the base template.

    Both templates are compiled up front so a broken base template fails
    here rather than on the first page.
    """
    env = Environment(
        loader=FileSystemLoader(str(settings.templates_dir)),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )
    try:
        env.get_template(settings.base_template)
        return env.get_template(settings.page_template)
    except TemplateError as exc:
        raise TemplateLoadError(f"{exc.__class__.__name__}: {exc}") from exc


def make_page(md_path: Path, settings: Settings) -> Page:
    """Read, render and assemble the page for one markdown file."""
    raw = md_path.read_bytes()
    return Page(
        title=md_path.name.removesuffix(MARKDOWN_SUFFIX),
        html=Markup(render_markdown(raw)),
        sidebar=tuple(build_sidebar(settings.content_dir, md_path, settings.root_page)),
        rel=root_prefix(md_path, settings.content_dir),
        meta=parse_frontmatter(raw) or {},
    )


def write_page(out_path: Path, template: Template, page: Page) -> None:
    """Render *page* through *template* and write it to *out_path*."""
    rendered = template.render(page=page)
    out_path.write_text(rendered, encoding="utf-8")


def build_pages(settings: Settings, template: Template) -> list[Path]:
    """Render every markdown file under the content root.

    Stops at the first error; pages written before it are left in place.
    Returns the output paths in the order they were written.
    """
    written: list[Path] = []
    for md_path in walk_files(settings.content_dir):
        if not is_markdown(md_path):
            continue

        out_path = output_path(md_path, settings.content_dir, settings.build_dir)
        out_path.parent.mkdir(parents=True, exist_ok=True)

        page = make_page(md_path, settings)
        write_page(out_path, template, page)
        logger.debug("Wrote %s -> %s", md_path, out_path)
        written.append(out_path)

    logger.info("Built %d pages into %s", len(written), settings.build_dir)
    return written
