"""Sidebar service: per-page navigation entries."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wikiplum.filesystem.content_tree import (
    HTML_SUFFIX,
    MARKDOWN_SUFFIX,
    is_markdown,
    relative_posix,
    walk_files,
)

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class NavItem:
    """A sidebar link, relative to the directory of the page that shows it."""

    title: str
    link: str


def is_root_page(rel_path: str, root_page: str) -> bool:
    """Return True when *rel_path* must be kept out of sidebars.

    The match is a substring test on the path relative to the content root,
    so ``index.md`` is excluded, but so are ``indexes/a.md`` and
    ``reindex.md``.
    """
    return root_page in rel_path


def build_sidebar(content_dir: Path, current_path: Path, root_page: str = "index") -> list[NavItem]:
    """Build the sidebar for the page at *current_path*.

    Lists every markdown page under *content_dir* except the root page, in
    lexical walk order.  Traversal errors propagate to the caller.
    """
    rel_root = relative_posix(content_dir, current_path.parent)

    items: list[NavItem] = []
    for path in walk_files(content_dir):
        if not is_markdown(path):
            continue
        rel = relative_posix(path, content_dir)
        if is_root_page(rel, root_page):
            continue

        link = rel if rel_root == "." else posixpath.join(rel_root, rel)
        link = link.removesuffix(MARKDOWN_SUFFIX)
        items.append(NavItem(title=posixpath.basename(link), link=link + HTML_SUFFIX))
    return items
