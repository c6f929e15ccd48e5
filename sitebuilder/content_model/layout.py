"""Fixed names of the site source tree.

The source root holds the portfolio, fonts, and templates directories plus the
about text and hero image. Each project directory holds a description, a
metadata document, and an image directory.
"""

from __future__ import annotations

PORTFOLIO_DIR = "portfolio"
FONTS_DIR = "fonts"
TEMPLATES_DIR = "templates"
ABOUT_FILE = "about.md"
HERO_IMAGE_FILE = "me.jpg"

DESCRIPTION_FILE = "content.md"
META_FILE = "meta.toml"
IMAGES_DIR = "img"

FONTS_MANIFEST_FILE = "fonts.toml"


__all__ = [
    "PORTFOLIO_DIR",
    "FONTS_DIR",
    "TEMPLATES_DIR",
    "ABOUT_FILE",
    "HERO_IMAGE_FILE",
    "DESCRIPTION_FILE",
    "META_FILE",
    "IMAGES_DIR",
    "FONTS_MANIFEST_FILE",
]
