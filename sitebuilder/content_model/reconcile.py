"""Reconciliation of the in-memory content tree against a fresh scan.

Every level (projects in the portfolio, images in a project) follows the same
merge:

1. scan the directory one level deep,
2. match each scanned child to a previous entry by exact backing path,
3. clone matched entries, create defaults for new ones, and rank both by
   scan order,
4. drop previous entries whose path was not scanned.

Previous collections are never mutated; callers swap in the returned list.
``id``/``position`` come out dense (``0..n-1``) and are only valid until the
next reconciliation.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path

from .documents import read_meta, read_text_document
from .fonts import resolve_fonts
from .fs import list_directory_children
from .layout import ABOUT_FILE, DESCRIPTION_FILE, FONTS_DIR, HERO_IMAGE_FILE, IMAGES_DIR, META_FILE, PORTFOLIO_DIR
from .types import AppState, Image, Project, Website

logger = logging.getLogger(__name__)


def _index_by_path(entries: list[Project] | list[Image]) -> dict[Path, Project | Image]:
    """Map backing path to entry; the first entry wins on duplicate paths."""
    indexed: dict[Path, Project | Image] = {}
    for entry in entries:
        indexed.setdefault(entry.path, entry)
    return indexed


def reconcile_images(previous: list[Image], img_dir: Path) -> list[Image]:
    """Merge ``previous`` images with the files currently in ``img_dir``."""
    known = _index_by_path(previous)
    images: list[Image] = []
    for child in list_directory_children(img_dir):
        if not child.is_file:
            continue
        existing = known.get(child.path)
        if existing is not None:
            image = copy.deepcopy(existing)
            image.path = child.path
            image.position = len(images)
        else:
            image = Image(path=child.path, position=len(images))
        images.append(image)
    images.sort(key=lambda image: image.position)
    return images


def refresh_project(project: Project) -> Project:
    """Re-derive ``project``'s description, metadata and images from disk.

    Documents found on disk replace the in-memory values unless the project
    holds unexported edits. Absent documents leave the in-memory values alone.
    Mutates and returns ``project``.
    """
    found_images = False
    for child in list_directory_children(project.path):
        if child.name == IMAGES_DIR and not child.is_file:
            project.images = reconcile_images(project.images, child.path)
            found_images = True
        elif child.name == DESCRIPTION_FILE and child.is_file:
            if not project.dirty:
                project.description = read_text_document(child.path)
        elif child.name == META_FILE and child.is_file:
            if not project.dirty:
                project.meta = read_meta(child.path)
    if not found_images:
        project.images = []
    return project


def reconcile_projects(previous: list[Project], portfolio_dir: Path) -> list[Project]:
    """Merge ``previous`` projects with the directories under ``portfolio_dir``."""
    known = _index_by_path(previous)
    projects: list[Project] = []
    kept = 0
    for child in list_directory_children(portfolio_dir):
        if child.is_file:
            continue
        existing = known.get(child.path)
        if existing is not None:
            project = copy.deepcopy(existing)
            project.path = child.path
            kept += 1
        else:
            project = Project(path=child.path)
        project.id = len(projects)
        refresh_project(project)
        projects.append(project)

    logger.debug(
        "reconciled %s: kept=%d added=%d dropped=%d",
        portfolio_dir,
        kept,
        len(projects) - kept,
        len(known) - kept,
    )
    return projects


def update_website_from_source(website: Website, source: Path) -> None:
    """Refresh ``website`` from the top level of ``source``.

    The portfolio is always reconciled, so a missing ``portfolio/`` empties
    it. About text, hero image and fonts only change when present on disk.
    """
    website.portfolio = reconcile_projects(website.portfolio, source / PORTFOLIO_DIR)
    for child in list_directory_children(source):
        if child.name == ABOUT_FILE and child.is_file:
            website.about = read_text_document(child.path)
        elif child.name == HERO_IMAGE_FILE and child.is_file:
            website.image = child.path
        elif child.name == FONTS_DIR and not child.is_file:
            website.fonts = resolve_fonts(child.path)


def update_from_source(state: AppState) -> None:
    """Rescan ``state.source`` and replace the entry tree held by ``state``."""
    if state.source is None:
        logger.debug("no source directory configured; skipping rescan")
        return
    update_website_from_source(state.website, state.source)


__all__ = [
    "reconcile_images",
    "refresh_project",
    "reconcile_projects",
    "update_website_from_source",
    "update_from_source",
]
