"""Front matter API endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from wikiplum.api.deps import get_page_source
from wikiplum.filesystem.frontmatter import parse_frontmatter
from wikiplum.services.source_service import PageSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["frontmatter"])


@router.get("/{page_path:path}")
async def get_frontmatter(
    page_path: str,
    source: Annotated[PageSource, Depends(get_page_source)],
    branch: Annotated[str | None, Query()] = None,
) -> Response:
    """Return the front matter of ``<page_path>.md`` as a flat JSON object.

    Pages without front matter (or with front matter that does not parse)
    give ``{}``.  The ``branch`` query parameter only matters for the remote
    source; an empty value selects the default branch.
    """
    if not page_path:
        return PlainTextResponse("not found", status_code=404)

    data = await source.fetch(page_path, branch or None)
    fm = parse_frontmatter(data)
    if fm is None:
        logger.debug("No front matter in %s", page_path)
        fm = {}
    return JSONResponse(content=fm)
