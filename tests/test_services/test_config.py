"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from wikiplum.config import DEFAULT_REMOTE_URL_TEMPLATE, Settings


class TestSettings:
    def test_default_settings(self) -> None:
        s = Settings(_env_file=None)
        assert s.debug is False
        assert s.content_dir == Path("content")
        assert s.build_dir == Path("build")
        assert s.templates_dir == Path("templates")
        assert s.base_template == "base.html"
        assert s.page_template == "page.html"
        assert s.root_page == "index"
        assert s.static_dir == Path("static")
        assert s.static_output_path == Path("build/static")
        assert s.page_source == "local"
        assert s.default_branch == "main"
        assert s.remote_url_template == DEFAULT_REMOTE_URL_TEMPLATE
        assert s.port == 8000

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONTENT_DIR", "/srv/wiki/content")
        monkeypatch.setenv("PAGE_SOURCE", "remote")
        monkeypatch.setenv("DEFAULT_BRANCH", "dev")
        s = Settings(_env_file=None)
        assert s.content_dir == Path("/srv/wiki/content")
        assert s.page_source == "remote"
        assert s.default_branch == "dev"

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("BUILD_DIR=public\nROOT_PAGE=home\n")
        s = Settings(_env_file=env_file)
        assert s.build_dir == Path("public")
        assert s.static_output_path == Path("public/static")
        assert s.root_page == "home"

    def test_invalid_page_source(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, page_source="ftp")

    def test_invalid_port(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, port=0)

    def test_remote_url_template_placeholders(self) -> None:
        url = DEFAULT_REMOTE_URL_TEMPLATE.format(branch="main", path="a.md")
        assert url == (
            "https://raw.githubusercontent.com/starillume/wikiplum/refs/heads/main/content/a.md"
        )


class TestCliEntry:
    def test_cli_entry_uses_app_settings(self) -> None:
        """cli_entry() should use the global app's settings, not create a new Settings()."""
        from wikiplum.main import app, cli_entry

        original_settings = getattr(app.state, "settings", None)
        app.state.settings = Settings(_env_file=None, host="127.0.0.1", port=9999, debug=True)

        try:
            with patch("uvicorn.run") as mock_run:
                cli_entry()

            mock_run.assert_called_once_with(
                "wikiplum.main:app",
                host="127.0.0.1",
                port=9999,
                reload=True,
            )
        finally:
            app.state.settings = original_settings
