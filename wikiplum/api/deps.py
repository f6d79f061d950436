"""Shared API dependencies: settings, page source."""

from __future__ import annotations

from fastapi import Request

from wikiplum.config import Settings
from wikiplum.services.source_service import PageSource


def get_settings(request: Request) -> Settings:
    """Get application settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_page_source(request: Request) -> PageSource:
    """Get the configured page source from app state."""
    source: PageSource = request.app.state.page_source
    return source
