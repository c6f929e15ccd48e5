"""In-memory operations on the site model.

Projects are addressed by backing path, the only handle that stays valid
across rescans. Operations that touch disk (add, delete, image import) report
failure by raising; the model is left unchanged when they do.
"""

from __future__ import annotations

import copy
import logging
import shutil
from pathlib import Path

from .content_model.layout import IMAGES_DIR, PORTFOLIO_DIR
from .content_model.types import AppState, Color, Image, Meta, Project, Website
from .errors import DeleteError, ExportError, SiteOperationError
from .export import export_site, ensure_folder
from .files import copy_file

logger = logging.getLogger(__name__)


def reindex_projects(website: Website) -> None:
    """Re-derive dense project ids from list order."""
    for idx, project in enumerate(website.portfolio):
        project.id = idx


def reindex_images(project: Project) -> None:
    """Re-derive dense image positions from list order."""
    for idx, image in enumerate(project.images):
        image.position = idx


def find_project(website: Website, path: Path) -> Project | None:
    """Return the project backed by ``path``, if any."""
    for project in website.portfolio:
        if project.path == path:
            return project
    return None


def add_project(state: AppState, name: str) -> Project:
    """Create project ``name`` under ``portfolio/`` and export the site.

    The new project is titled ``name`` and appended after existing ones.
    Dot-prefixed names are rejected because rescans skip hidden entries.
    """
    if state.source is None:
        raise SiteOperationError("no source directory configured")
    name = name.strip()
    if not name or name.startswith(".") or "/" in name or "\\" in name:
        raise SiteOperationError(f"invalid project name: {name!r}")

    path = state.source / PORTFOLIO_DIR / name
    if find_project(state.website, path) is not None:
        raise SiteOperationError(f"project already exists: {path}")

    project = Project(
        path=path,
        id=len(state.website.portfolio),
        meta=Meta(title=name),
        dirty=True,
    )
    state.website.portfolio.append(project)
    try:
        export_site(state)
    except ExportError:
        state.website.portfolio.remove(project)
        raise
    logger.debug("added project %s", path)
    return project


def update_project(website: Website, project: Project) -> Project:
    """Replace the project sharing ``project.path`` and mark it unexported.

    The model stores a copy, so later changes to ``project`` do not leak in.
    """
    for idx, existing in enumerate(website.portfolio):
        if existing.path == project.path:
            updated = copy.deepcopy(project)
            updated.id = existing.id
            updated.dirty = True
            website.portfolio[idx] = updated
            return updated
    raise SiteOperationError(f"no project at {project.path}")


def delete_project(website: Website, path: Path) -> None:
    """Remove the project backed by ``path`` from disk, then from the model.

    Remaining projects are re-ranked immediately so ids stay dense.
    """
    project = find_project(website, path)
    if project is None:
        raise SiteOperationError(f"no project at {path}")
    try:
        shutil.rmtree(project.path)
    except FileNotFoundError:
        logger.debug("project directory %s already gone", project.path)
    except OSError as exc:
        raise DeleteError(f"cannot delete {project.path}: {exc}") from exc

    website.portfolio = [item for item in website.portfolio if item.path != path]
    reindex_projects(website)


def move_image(project: Project, old_position: int, new_position: int) -> None:
    """Swap the images at two positions and re-derive positions.

    The order is in-memory only and does not mark the project dirty: the next
    rescan re-derives positions from the ``img/`` scan order.
    """
    count = len(project.images)
    if not 0 <= old_position < count or not 0 <= new_position < count:
        raise SiteOperationError(
            f"cannot move image {old_position} to {new_position} in a list of {count}"
        )
    images = project.images
    images[old_position], images[new_position] = images[new_position], images[old_position]
    reindex_images(project)


def add_image(project: Project, source_file: Path) -> Image:
    """Copy ``source_file`` into the project's image directory and append it."""
    img_dir = project.path / IMAGES_DIR
    ensure_folder(img_dir)
    dest = copy_file(source_file, img_dir)
    existing = next((image for image in project.images if image.path == dest), None)
    if existing is not None:
        return existing
    image = Image(path=dest, position=len(project.images))
    project.images.append(image)
    return image


def remove_image(project: Project, path: Path) -> bool:
    """Drop the image at ``path`` from the model; the file is left on disk.

    The project is not marked dirty, and since the file stays in ``img/`` the
    next rescan picks it up again. Use ``files.remove_file`` to delete it.
    """
    remaining = [image for image in project.images if image.path != path]
    if len(remaining) == len(project.images):
        return False
    project.images = remaining
    reindex_images(project)
    return True


def set_site_title(website: Website, title: str) -> None:
    website.title = title


def set_accent_color(website: Website, red: int, green: int, blue: int, alpha: float = 1.0) -> None:
    """Set the accent color; channels are clamped to 0-255 and alpha to 0-1."""
    website.accent_color = Color(
        red=max(0, min(255, int(red))),
        green=max(0, min(255, int(green))),
        blue=max(0, min(255, int(blue))),
        alpha=max(0.0, min(1.0, float(alpha))),
    )


__all__ = [
    "reindex_projects",
    "reindex_images",
    "find_project",
    "add_project",
    "update_project",
    "delete_project",
    "move_image",
    "add_image",
    "remove_image",
    "set_site_title",
    "set_accent_color",
]
