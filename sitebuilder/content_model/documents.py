"""Per-entry document codecs.

Projects carry a TOML metadata document and a plain-text description; the
site root carries the about text. Reads are tolerant: a missing or malformed
document yields the default value. Writes replace the whole file and raise
``ExportError`` on failure.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from ..errors import ExportError
from .types import Meta

logger = logging.getLogger(__name__)

_KNOWN_META_KEYS = ("title", "subtitle", "teammates")


def decode_text(data: bytes) -> str:
    """Decode document bytes, trying UTF-8 before latin-1."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def read_text_document(path: Path) -> str:
    """Return the text of ``path`` or ``""`` when it cannot be read."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.debug("cannot read %s: %s", path, exc)
        return ""
    return decode_text(data)


def _coerce_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _coerce_str_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def meta_from_mapping(data: dict[str, Any]) -> Meta:
    """Build ``Meta`` from a decoded document.

    Known keys with the wrong type fall back to their defaults; non-string
    teammates are dropped. Unknown keys are kept in ``extra``.
    """
    return Meta(
        title=_coerce_str(data.get("title", "")),
        subtitle=_coerce_str(data.get("subtitle", "")),
        teammates=_coerce_str_list(data.get("teammates", [])),
        extra={key: value for key, value in data.items() if key not in _KNOWN_META_KEYS},
    )


def parse_meta(text: str) -> Meta:
    """Parse TOML metadata text, returning ``Meta()`` when it is malformed."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        logger.debug("malformed metadata document: %s", exc)
        return Meta()
    return meta_from_mapping(data)


def read_meta(path: Path) -> Meta:
    """Load the metadata document at ``path`` with default fallback."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.debug("cannot read metadata %s: %s", path, exc)
        return Meta()
    return parse_meta(decode_text(data))


def meta_to_mapping(meta: Meta) -> dict[str, Any]:
    """Return the document mapping for ``meta``; known fields come first."""
    data: dict[str, Any] = {
        "title": meta.title,
        "subtitle": meta.subtitle,
        "teammates": list(meta.teammates),
    }
    for key, value in meta.extra.items():
        if key not in data:
            data[key] = value
    return data


def meta_to_toml(meta: Meta) -> str:
    """Render ``meta`` as a TOML document."""
    return tomli_w.dumps(meta_to_mapping(meta))


def write_text_document(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` encoded as UTF-8, without newline translation."""
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise ExportError(f"cannot write {path}: {exc}") from exc


def write_meta(path: Path, meta: Meta) -> None:
    """Write ``meta`` as the TOML document at ``path``."""
    try:
        rendered = meta_to_toml(meta)
    except (TypeError, ValueError) as exc:
        raise ExportError(f"cannot encode metadata for {path}: {exc}") from exc
    write_text_document(path, rendered)


__all__ = [
    "decode_text",
    "read_text_document",
    "meta_from_mapping",
    "parse_meta",
    "read_meta",
    "meta_to_mapping",
    "meta_to_toml",
    "write_text_document",
    "write_meta",
]
