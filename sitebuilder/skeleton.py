"""Bootstrap the fixed top-level layout of a site source directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .content_model.layout import ABOUT_FILE, FONTS_DIR, HERO_IMAGE_FILE, PORTFOLIO_DIR, TEMPLATES_DIR

logger = logging.getLogger(__name__)

SKELETON_DIRS = (FONTS_DIR, PORTFOLIO_DIR, TEMPLATES_DIR)
SKELETON_FILES = (ABOUT_FILE, HERO_IMAGE_FILE)


def ensure_dir_defaults(source: Path) -> list[Path]:
    """Create missing skeleton entries under ``source``.

    Existing entries are never touched. Items that cannot be created are
    logged and skipped. Returns the paths that were created.
    """
    created: list[Path] = []
    try:
        source.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("cannot create source directory %s: %s", source, exc)
        return created

    for name in SKELETON_DIRS:
        path = source / name
        if path.exists():
            continue
        try:
            path.mkdir()
        except OSError as exc:
            logger.warning("cannot create %s: %s", path, exc)
            continue
        created.append(path)

    for name in SKELETON_FILES:
        path = source / name
        if path.exists():
            continue
        try:
            path.touch(exist_ok=False)
        except OSError as exc:
            logger.warning("cannot create %s: %s", path, exc)
            continue
        created.append(path)
    return created


__all__ = ["SKELETON_DIRS", "SKELETON_FILES", "ensure_dir_defaults"]
