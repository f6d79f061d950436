"""Page sources: where the API reads markdown from."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import httpx

from wikiplum.exceptions import InternalServerError, PageNotFoundError
from wikiplum.filesystem.content_tree import MARKDOWN_SUFFIX

if TYPE_CHECKING:
    from pathlib import Path

    from wikiplum.config import Settings

logger = logging.getLogger(__name__)


class PageSource(Protocol):
    """Resolves a wiki path (without ``.md``) to raw markdown bytes."""

    name: str

    async def fetch(self, path: str, branch: str | None = None) -> bytes: ...

    async def aclose(self) -> None: ...


class LocalPageSource:
    """Reads ``<content_dir>/<path>.md`` from local disk.

    The branch argument is accepted for interface parity and ignored.
    """

    name = "local"

    def __init__(self, content_dir: Path) -> None:
        self.content_dir = content_dir

    def _resolve(self, path: str) -> Path:
        try:
            full_path = (self.content_dir / (path + MARKDOWN_SUFFIX)).resolve()
        except ValueError as exc:
            # Null bytes and similar cannot name a file on disk.
            logger.warning("Rejected unusable page path %r: %s", path, exc)
            raise PageNotFoundError(path) from exc
        if not full_path.is_relative_to(self.content_dir.resolve()):
            logger.warning("Rejected path outside the content directory: %s", path)
            raise PageNotFoundError(path)
        return full_path

    async def fetch(self, path: str, branch: str | None = None) -> bytes:
        full_path = self._resolve(path)
        if not full_path.is_file():
            raise PageNotFoundError(path)
        try:
            return full_path.read_bytes()
        except OSError as exc:
            raise InternalServerError(f"Failed to read {full_path}: {exc}") from exc

    async def aclose(self) -> None:
        return None


class RemotePageSource:
    """Fetches raw markdown from a source-control branch over HTTP."""

    name = "remote"

    def __init__(
        self,
        client: httpx.AsyncClient,
        url_template: str,
        user_agent: str,
        default_branch: str = "main",
    ) -> None:
        self.client = client
        self.url_template = url_template
        self.user_agent = user_agent
        self.default_branch = default_branch

    def url_for(self, path: str, branch: str | None = None) -> str:
        """Raw-content URL of ``<path>.md`` on *branch*."""
        return self.url_template.format(
            branch=branch or self.default_branch,
            path=path + MARKDOWN_SUFFIX,
        )

    async def fetch(self, path: str, branch: str | None = None) -> bytes:
        url = self.url_for(path, branch)
        try:
            response = await self.client.get(url, headers={"User-Agent": self.user_agent})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise InternalServerError(f"Fetching {url!r} failed: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise PageNotFoundError(path)
        if response.is_error:
            raise InternalServerError(f"Fetching {url} returned HTTP {response.status_code}")
        return response.content

    async def aclose(self) -> None:
        await self.client.aclose()


def create_page_source(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PageSource:
    """Build the page source selected by ``settings.page_source``."""
    if settings.page_source == "remote":
        client = httpx.AsyncClient(
            timeout=settings.remote_timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )
        return RemotePageSource(
            client,
            url_template=settings.remote_url_template,
            user_agent=settings.remote_user_agent,
            default_branch=settings.default_branch,
        )
    return LocalPageSource(settings.content_dir)
