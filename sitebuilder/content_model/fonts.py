"""Font-set resolution for the site ``fonts/`` directory.

An explicit ``fonts.toml`` manifest (``bold = "<file>"``, ``normal =
"<file>"``) takes precedence for the roles it names. Roles it leaves out, or
names a missing file for, are decided by file name: a name containing
``bold`` is the bold variant and the first other file is the normal variant.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from .documents import read_text_document
from .fs import child_files
from .layout import FONTS_MANIFEST_FILE
from .types import Fonts

logger = logging.getLogger(__name__)

_ROLES = ("bold", "normal")


def _manifest_names(fonts_dir: Path) -> dict[str, str]:
    """Return the role-to-filename entries of the manifest.

    Empty when the manifest is absent, malformed, or names neither role.
    """
    manifest = fonts_dir / FONTS_MANIFEST_FILE
    if not manifest.is_file():
        return {}
    try:
        data = tomllib.loads(read_text_document(manifest))
    except tomllib.TOMLDecodeError as exc:
        logger.debug("ignoring malformed font manifest %s: %s", manifest, exc)
        return {}
    return {role: data[role] for role in _ROLES if isinstance(data.get(role), str) and data[role]}


def resolve_fonts(fonts_dir: Path) -> Fonts:
    """Resolve the bold/normal font files under ``fonts_dir``.

    Roles the manifest names with an existing file use that file. Any other
    role falls back to the file-name rule, skipping files the manifest
    already claimed.
    """
    resolved = Fonts()
    claimed: set[Path] = set()
    for role, name in _manifest_names(fonts_dir).items():
        candidate = fonts_dir / name
        if candidate.is_file():
            setattr(resolved, role, candidate)
            claimed.add(candidate)
        else:
            logger.debug("font manifest names missing %s file %s", role, candidate)

    for child in child_files(fonts_dir):
        if child.name == FONTS_MANIFEST_FILE or child.path in claimed:
            continue
        if "bold" in child.name.casefold():
            if resolved.bold is None:
                resolved.bold = child.path
                claimed.add(child.path)
        elif resolved.normal is None:
            resolved.normal = child.path
            claimed.add(child.path)
    return resolved


__all__ = ["resolve_fonts"]
