"""Static asset mirroring into the build tree."""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING

from wikiplum.filesystem.content_tree import walk_files

if TYPE_CHECKING:
    from pathlib import Path

    from wikiplum.config import Settings

logger = logging.getLogger(__name__)


def copy_static(settings: Settings) -> list[Path]:
    """Copy every file under the static directory into the build tree.

    Relative paths are preserved and destination directories are created as
    needed.  A missing static directory is an error like any other.
    """
    src = settings.static_dir
    dst = settings.static_output_path
    dst.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for path in walk_files(src):
        out_path = dst / path.relative_to(src)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(path, out_path)
        copied.append(out_path)

    logger.info("Copied %d static files into %s", len(copied), dst)
    return copied
