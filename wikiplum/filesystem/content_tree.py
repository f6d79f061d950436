"""Content tree traversal and source-to-output path mapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every non-directory entry under *root* in lexical order.

    Entries of each directory are sorted by name and subdirectories are
    descended at the position where they sort, so ``a.md``, ``b/``, ``c.md``
    yields ``a.md``, ``b/...``, ``c.md``.  Symlinked directories are not
    followed.  Errors (a missing root, unreadable directories) propagate.
    """
    if not root.is_dir():
        if root.exists():
            yield root
            return
        raise FileNotFoundError(f"No such directory: {root}")

    with os.scandir(root) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        path = root / entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from walk_files(path)
        else:
            yield path


def is_markdown(path: Path) -> bool:
    """Return True when *path* names a markdown source file."""
    return path.name.endswith(MARKDOWN_SUFFIX)


def relative_posix(path: Path, start: Path) -> str:
    """Relative path from directory *start* to *path*, with ``/`` separators."""
    return Path(os.path.relpath(path, start)).as_posix()


def output_path(md_path: Path, content_dir: Path, build_dir: Path) -> Path:
    """Map a markdown file under *content_dir* to its HTML file under *build_dir*.

    ``content/guides/setup.md`` becomes ``build/guides/setup.html``.
    """
    rel = relative_posix(md_path, content_dir).removesuffix(MARKDOWN_SUFFIX)
    return build_dir / (rel + HTML_SUFFIX)


def root_prefix(md_path: Path, content_dir: Path) -> str:
    """Relative path from the page's directory back to the content root.

    ``"."`` for top-level pages, ``".."`` one level down, and so on.
    """
    return relative_posix(content_dir, md_path.parent)
