"""Error types raised while reading and projecting GPX documents."""

from __future__ import annotations


class GpxKitError(RuntimeError):
    """Base error for gpxkit failures."""


class DocumentUnreadable(GpxKitError):
    """Raised when a GPX file is missing, unreadable, or cannot be decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedDocument(GpxKitError):
    """Raised when the file contents are not well-formed XML."""

    def __init__(self, reason: str, path: str | None = None):
        message = f"Malformed GPX document {path}: {reason}" if path else f"Malformed GPX document: {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class StructureMismatch(GpxKitError):
    """Raised when a parsed document lacks the track or extension shape being read."""


__all__ = [
    "DocumentUnreadable",
    "GpxKitError",
    "MalformedDocument",
    "StructureMismatch",
]
