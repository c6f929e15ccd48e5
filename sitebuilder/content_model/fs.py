"""One-level filesystem scanning for the content tree.

Higher layers call ``list_directory_children`` once per directory they
reconcile. Entries that fail while being inspected are skipped so a single
unreadable child never aborts a rescan.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannedChild:
    """One immediate directory child observed during a scan."""

    name: str
    path: Path
    is_file: bool


def list_directory_children(directory: Path, show_hidden: bool = False) -> list[ScannedChild]:
    """List immediate children of ``directory`` in a deterministic order.

    Returns an empty list when ``directory`` cannot be opened. Children whose
    type cannot be determined (permission error, vanished mid-scan) are left
    out. Ordering is by case-folded name, then raw name.
    """
    children: list[ScannedChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_file = child.is_file()
                    is_dir = child.is_dir()
                except OSError as exc:
                    logger.debug("skipping unreadable entry %s: %s", child.path, exc)
                    continue
                if not is_file and not is_dir:
                    # Broken symlink or a child removed between listing and stat.
                    logger.debug("skipping vanished entry %s", child.path)
                    continue
                children.append(ScannedChild(name=name, path=Path(child.path), is_file=is_file))
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        return []

    children.sort(key=lambda item: (item.name.casefold(), item.name))
    return children


def child_directories(directory: Path, show_hidden: bool = False) -> list[ScannedChild]:
    """Return only the directory children of ``directory``."""
    return [child for child in list_directory_children(directory, show_hidden) if not child.is_file]


def child_files(directory: Path, show_hidden: bool = False) -> list[ScannedChild]:
    """Return only the file children of ``directory``."""
    return [child for child in list_directory_children(directory, show_hidden) if child.is_file]


__all__ = [
    "ScannedChild",
    "list_directory_children",
    "child_directories",
    "child_files",
]
