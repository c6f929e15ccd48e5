"""Domain datatypes for the site content tree.

``Project`` and ``Image`` are the identity-bearing entries reconciled against
the filesystem. Their ``path`` is the durable identity; ``id``/``position`` is
a dense rank recomputed on every reconciliation and must not be cached across
one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Meta:
    """Structured fields of a project's metadata document.

    ``extra`` carries keys this model does not know so a document survives a
    load/export round-trip unchanged.
    """

    title: str = ""
    subtitle: str = ""
    teammates: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image:
    """One picture file belonging to a project."""

    path: Path
    position: int = 0


@dataclass
class Project:
    """One portfolio entry backed by a directory under ``portfolio/``.

    ``dirty`` is set while metadata/description edits exist only in memory and
    cleared once they are exported.
    """

    path: Path
    id: int = 0
    meta: Meta = field(default_factory=Meta)
    description: str = ""
    images: list[Image] = field(default_factory=list)
    dirty: bool = False


@dataclass
class Fonts:
    bold: Path | None = None
    normal: Path | None = None


@dataclass
class Color:
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: float = 1.0


@dataclass
class Website:
    """Page/site aggregate owning the ordered portfolio."""

    title: str = ""
    portfolio: list[Project] = field(default_factory=list)
    about: str = ""
    image: Path | None = None
    fonts: Fonts = field(default_factory=Fonts)
    accent_color: Color = field(default_factory=Color)


@dataclass
class AppState:
    """Top-level application state persisted wholesale by the session cache."""

    source: Path | None = None
    website: Website = field(default_factory=Website)


__all__ = [
    "Meta",
    "Image",
    "Project",
    "Fonts",
    "Color",
    "Website",
    "AppState",
]
