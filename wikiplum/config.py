"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REMOTE_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/starillume/wikiplum/refs/heads/{branch}/content/{path}"
)
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:109.0) Gecko/20100101 Firefox/111.0"
)


class Settings(BaseSettings):
    """Wikiplum settings.

    Every path is resolved against the working directory, so running the
    build from the site checkout needs no configuration at all.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False

    # Site layout
    content_dir: Path = Path("content")
    build_dir: Path = Path("build")
    templates_dir: Path = Path("templates")
    base_template: str = "base.html"
    page_template: str = "page.html"
    root_page: str = "index"
    static_dir: Path = Path("static")
    static_output_dir: str = "static"

    # Frontmatter API
    page_source: Literal["local", "remote"] = "local"
    remote_url_template: str = DEFAULT_REMOTE_URL_TEMPLATE
    remote_user_agent: str = DEFAULT_USER_AGENT
    default_branch: str = "main"
    remote_timeout_seconds: float = Field(default=10.0, gt=0)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    @property
    def static_output_path(self) -> Path:
        """Destination of the static asset mirror inside the build tree."""
        return self.build_dir / self.static_output_dir


def configure_logging(debug: bool) -> None:
    """Configure process-wide logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)
