"""Domain model for the site content tree plus filesystem reconciliation.

This package contains non-UI primitives:
- entry datatypes (projects, images, fonts, site, application state)
- one-level filesystem scanning
- metadata/description document codecs
- reconciliation of a previous entry tree against a fresh scan
"""

from __future__ import annotations

from .types import AppState, Color, Fonts, Image, Meta, Project, Website
from .fs import ScannedChild, child_directories, child_files, list_directory_children
from .documents import (
    meta_to_toml,
    parse_meta,
    read_meta,
    read_text_document,
    write_meta,
    write_text_document,
)
from .fonts import resolve_fonts
from .reconcile import (
    reconcile_images,
    reconcile_projects,
    refresh_project,
    update_from_source,
    update_website_from_source,
)

__all__ = [
    "AppState",
    "Color",
    "Fonts",
    "Image",
    "Meta",
    "Project",
    "Website",
    "ScannedChild",
    "list_directory_children",
    "child_directories",
    "child_files",
    "read_text_document",
    "read_meta",
    "parse_meta",
    "meta_to_toml",
    "write_text_document",
    "write_meta",
    "resolve_fonts",
    "reconcile_images",
    "reconcile_projects",
    "refresh_project",
    "update_website_from_source",
    "update_from_source",
]
