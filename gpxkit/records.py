"""Plain value records produced by the GPX projectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Unparsed:
    """A field that exists in the document but whose text could not be converted.

    ``raw`` is the text as found, or ``None`` when the attribute was missing.
    """

    raw: str | None = None

    def __str__(self) -> str:
        return f"<unparsed {self.raw!r}>"


@dataclass(frozen=True)
class TrackPoint:
    """One ``<trkpt>`` sample.

    ``lat`` and ``lon`` are always set (possibly to ``Unparsed``); the other
    fields are ``None`` when the matching child element is absent.
    """

    lat: float | Unparsed
    lon: float | Unparsed
    elevation: float | Unparsed | None = None
    timestamp: str | Unparsed | None = None
    heart_rate: int | Unparsed | None = None


@dataclass(frozen=True)
class Metadata:
    """Descriptive fields from the document's ``<metadata>`` block."""

    name: str | None = None
    description: str | None = None
    author: str | None = None
