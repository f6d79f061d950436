"""Application-level exception types.

Convention:
- ``PageNotFoundError``: the requested markdown page does not exist in the
  configured page source.  The API answers 404 ``"file not found"``.
- ``InternalServerError``: for errors whose details must never reach clients
  (network failures, unexpected upstream statuses, storage errors).  The
  global handler logs the full message at ERROR and returns a generic
  ``"internal error"`` (500) to the client.
- ``BuildError`` and its subclasses: fatal static build failures.  The build
  CLI prints them and exits with status 1.
"""

from __future__ import annotations


class PageNotFoundError(Exception):
    """Raised when a page source has no markdown file for the requested path."""


class InternalServerError(Exception):
    """Raised for internal errors whose details must not be exposed to clients.

    The global exception handler in ``wikiplum/main.py`` catches this, logs
    the full message server-side, and returns HTTP 500 with a generic
    ``"internal error"`` body.
    """


class BuildError(Exception):
    """Base class for fatal static build failures."""


class TemplateLoadError(BuildError):
    """Raised when the base or page template is missing or does not parse."""
