"""Single-file helpers used when adding or removing project assets."""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import FileOperationError


def copy_file(source: Path, dest_dir: Path) -> Path:
    """Copy ``source`` into ``dest_dir`` keeping its name; return the new path."""
    if not source.name:
        raise FileOperationError(f"cannot determine file name of {source}")
    dest = dest_dir / source.name
    try:
        shutil.copyfile(source, dest)
    except OSError as exc:
        raise FileOperationError(f"cannot copy {source} to {dest}: {exc}") from exc
    return dest


def remove_file(path: Path) -> None:
    """Delete the file at ``path``."""
    try:
        path.unlink()
    except OSError as exc:
        raise FileOperationError(f"cannot remove {path}: {exc}") from exc


__all__ = ["copy_file", "remove_file"]
