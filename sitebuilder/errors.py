"""Errors surfaced to callers of site operations.

Scan-time problems never raise: unreadable entries are skipped and malformed
documents fall back to defaults. Only explicit operations (export, delete,
copy) report failure, always with the underlying ``OSError`` chained.
"""

from __future__ import annotations


class SiteBuilderError(Exception):
    """Base class for reportable sitebuilder failures."""


class SiteOperationError(SiteBuilderError):
    """An in-memory site operation was given invalid input."""


class DeleteError(SiteOperationError):
    """Removing a project's backing directory failed."""


class ExportError(SiteBuilderError):
    """Writing a document or directory during export failed."""


class FileOperationError(SiteBuilderError):
    """A single-file copy or removal failed."""


__all__ = [
    "SiteBuilderError",
    "SiteOperationError",
    "DeleteError",
    "ExportError",
    "FileOperationError",
]
