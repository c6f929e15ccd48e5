"""Session cache location.

The cache lives in the platform user-cache directory. A record left in the
legacy ``~/.site_builder`` directory is still read when the default location
has none.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_cache_dir

APP_NAME = "sitebuilder"
CACHE_FILENAME = "cache.pickle"
DEFAULT_CACHE_DIR = Path(user_cache_dir(APP_NAME, appauthor=False))
LEGACY_CACHE_DIR = Path.home() / ".site_builder"
CACHE_DIR = DEFAULT_CACHE_DIR


def cache_path() -> Path:
    """Return the path session records are written to."""
    return CACHE_DIR / CACHE_FILENAME


def load_cache_path() -> Path:
    """Return preferred cache record path, falling back to the legacy location."""
    path = cache_path()
    if path.exists():
        return path
    legacy = LEGACY_CACHE_DIR / CACHE_FILENAME
    if CACHE_DIR == DEFAULT_CACHE_DIR and legacy.exists():
        return legacy
    return path


__all__ = [
    "APP_NAME",
    "CACHE_FILENAME",
    "DEFAULT_CACHE_DIR",
    "LEGACY_CACHE_DIR",
    "CACHE_DIR",
    "cache_path",
    "load_cache_path",
]
