"""
Copy the browser client into a standalone directory for a static web server.

Run with:  python -m menu_catalog.build_frontend [DIST_DIR]

Then deploy with e.g. `cp -r dist/* /var/www/html/`.
"""
import logging
import shutil
import sys
from pathlib import Path
from typing import Optional, Union

from menu_catalog.core.config import settings
from menu_catalog.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"
FRONTEND_FILES = ("index.html", "style.css", "script.js")


def build_frontend(
    dist_dir: Union[str, Path],
    source_dir: Union[str, Path] = STATIC_DIR,
) -> list[Path]:
    """
    Copy the frontend files from *source_dir* into *dist_dir*.
    Missing source files are logged and skipped. Returns the copied paths.
    """
    dist = Path(dist_dir)
    source = Path(source_dir)
    logger.info("Building frontend into %s", dist)
    dist.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for name in FRONTEND_FILES:
        try:
            copied.append(Path(shutil.copyfile(source / name, dist / name)))
            logger.info("Copied %s to %s", name, dist)
        except OSError as e:
            logger.error("Error copying %s: %s", name, e)
    logger.info("Frontend build complete: %s of %s files", len(copied), len(FRONTEND_FILES))
    return copied


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    dist_dir = args[0] if args else settings.FRONTEND_DIST_DIR
    try:
        build_frontend(dist_dir)
    except OSError:
        logger.error("Frontend build failed", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
