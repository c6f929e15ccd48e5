"""Export in-memory edits back to the site source tree.

Each file is written whole. The first failure aborts the remaining writes
and is raised as ``ExportError``; files already written stay written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .content_model.documents import write_meta, write_text_document
from .content_model.layout import ABOUT_FILE, DESCRIPTION_FILE, IMAGES_DIR, META_FILE
from .content_model.types import AppState, Project
from .errors import ExportError

logger = logging.getLogger(__name__)


def ensure_folder(path: Path) -> None:
    """Create ``path`` (and parents) when it does not exist yet."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"cannot create directory {path}: {exc}") from exc


def export_project(project: Project) -> None:
    """Write ``project``'s description and metadata into its directory."""
    ensure_folder(project.path)
    ensure_folder(project.path / IMAGES_DIR)
    write_text_document(project.path / DESCRIPTION_FILE, project.description)
    write_meta(project.path / META_FILE, project.meta)
    project.dirty = False


def export_site(state: AppState) -> None:
    """Flush every project plus the about text of ``state`` to disk."""
    if state.source is None:
        raise ExportError("no source directory configured")
    for project in state.website.portfolio:
        export_project(project)
    write_text_document(state.source / ABOUT_FILE, state.website.about)
    logger.debug("exported %d projects to %s", len(state.website.portfolio), state.source)


__all__ = [
    "ensure_folder",
    "export_project",
    "export_site",
]
