"""Static build entry point: content/ + templates/ + static/ -> build/."""

from __future__ import annotations

import argparse
import logging
import sys

from wikiplum.config import Settings, configure_logging
from wikiplum.services.site_service import build_pages, load_templates
from wikiplum.services.static_service import copy_static

logger = logging.getLogger(__name__)


def run_build(settings: Settings) -> int:
    """Run the whole build and return the process exit code.

    The build stops at the first failure; there is no partial-success mode.
    """
    try:
        template = load_templates(settings)
    except Exception as exc:
        logger.debug("Template loading failed", exc_info=True)
        print(f"Error: loading templates: {exc}")
        return 1

    try:
        pages = build_pages(settings, template)
    except Exception as exc:
        logger.debug("Site build failed", exc_info=True)
        print(f"Error: building site: {exc}")
        return 1

    try:
        assets = copy_static(settings)
    except Exception as exc:
        logger.debug("Static copy failed", exc_info=True)
        print(f"Error: copying static files: {exc}")
        return 1

    print(
        f"Build complete. {len(pages)} page(s), {len(assets)} static file(s) "
        f"-> {settings.build_dir}"
    )
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description=(
            "Build the wiki: render content/ through templates/ into build/ and "
            "mirror static/. Paths are configured through environment variables "
            "or a .env file."
        ),
    )
    parser.parse_args()

    settings = Settings()
    configure_logging(settings.debug)
    sys.exit(run_build(settings))


if __name__ == "__main__":
    main()
