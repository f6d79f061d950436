"""Markdown to HTML renderer for wiki pages."""

from __future__ import annotations

import logging

import markdown

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """Raised when a page cannot be converted to HTML."""


# fenced_code brings Python-Markdown in line with CommonMark fenced blocks.
MARKDOWN_EXTENSIONS: tuple[str, ...] = ("fenced_code",)


def rewrite_md_links(raw: bytes) -> bytes:
    """Point intra-site links at the generated pages.

    Every literal ``.md`` becomes ``.html``.  The substitution is textual, not
    link-aware: ``.md`` in prose or code blocks is rewritten as well, so
    ``see my.md file`` renders as ``see my.html file``.
    """
    return raw.replace(b".md", b".html")


def render_markdown(raw: bytes) -> str:
    """Render raw markdown bytes to an HTML fragment.

    Raises RenderError if the content is not UTF-8 or conversion fails.
    """
    try:
        text = rewrite_md_links(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RenderError(f"Markdown is not valid UTF-8: {exc}") from exc

    try:
        return markdown.markdown(text, extensions=list(MARKDOWN_EXTENSIONS))
    except Exception as exc:
        raise RenderError(f"Markdown conversion failed: {exc}") from exc
