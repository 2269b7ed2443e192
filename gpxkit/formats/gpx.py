"""GPX track point and metadata extraction for gpxkit.

Only the first ``<trk>`` and its first ``<trkseg>`` are read. Each
``<trkpt>`` becomes a TrackPoint with latitude, longitude and, when present,
elevation, a local-time timestamp and the Garmin TrackPointExtension heart
rate. The ``<metadata>`` block yields name, description and author.
"""

import asyncio
import logging
import xml.etree.ElementTree as ET
from datetime import tzinfo

from dateparser.date import DateDataParser

from gpxkit.document import find_child, find_children, local_name, parse_document, read_document
from gpxkit.errors import StructureMismatch
from gpxkit.records import Metadata, TrackPoint, Unparsed

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# dateparser would otherwise accept fragments like "10:00" as today's date
_DATEPARSER_SETTINGS = {"STRICT_PARSING": True}


def _gpx_root(root: ET.Element) -> ET.Element:
    if local_name(root.tag) != "gpx":
        raise StructureMismatch(f"Expected <gpx> root element, found <{local_name(root.tag)}>")
    return root


def _child_text(element: ET.Element, name: str) -> str | None:
    """Text of the first *name* child, or ``None`` if missing or empty."""
    child = find_child(element, name)
    if child is None or not child.text:
        return None
    return child.text


def _parse_float(text: str | None) -> float | Unparsed:
    if text is None:
        return Unparsed(None)
    try:
        return float(text.strip())
    except ValueError:
        return Unparsed(text)


def _parse_int(text: str) -> int | Unparsed:
    try:
        return int(text.strip())
    except ValueError:
        return Unparsed(text)


def _date_parser() -> DateDataParser:
    return DateDataParser(languages=["en"], settings=_DATEPARSER_SETTINGS)


def _render_timestamp(
    text: str, parser: DateDataParser, tz: tzinfo | None, timestamp_format: str
) -> str | Unparsed:
    """Parse an ISO-8601-like time and render it in *tz* (``None`` = local)."""
    moment = parser.get_date_data(text.strip()).date_obj
    if moment is None:
        return Unparsed(text)
    try:
        # Naive times are taken as local time, then converted.
        return moment.astimezone(tz).strftime(timestamp_format)
    except (OverflowError, ValueError):
        # Shifting past year 1 or 9999 leaves the datetime range
        return Unparsed(text)


def _heart_rate(point: ET.Element) -> int | Unparsed | None:
    extensions = find_child(point, "extensions")
    if extensions is None:
        return None

    wrapper = find_child(extensions, "TrackPointExtension")
    if wrapper is None:
        raise StructureMismatch("<extensions> has no TrackPointExtension element")
    hr = find_child(wrapper, "hr")
    if hr is None:
        raise StructureMismatch("TrackPointExtension has no <hr> element")

    if not hr.text:
        return None
    return _parse_int(hr.text)


def _track_point(
    point: ET.Element, parser: DateDataParser, tz: tzinfo | None, timestamp_format: str
) -> TrackPoint:
    elevation_text = _child_text(point, "ele")
    time_text = _child_text(point, "time")
    return TrackPoint(
        lat=_parse_float(point.get("lat")),
        lon=_parse_float(point.get("lon")),
        elevation=_parse_float(elevation_text) if elevation_text is not None else None,
        timestamp=_render_timestamp(time_text, parser, tz, timestamp_format) if time_text is not None else None,
        heart_rate=_heart_rate(point),
    )


def project_track_points(
    root: ET.Element,
    tz: tzinfo | None = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> list[TrackPoint]:
    """Project the first track's first segment of a parsed GPX tree.

    Args:
        root: Root element returned by ``parse_document``.
        tz: Time zone for rendered timestamps; ``None`` uses the process's
            local time zone.
        timestamp_format: ``strftime`` format for rendered timestamps.

    Returns:
        TrackPoints in document order.

    Raises:
        StructureMismatch: the root is not ``<gpx>``, there is no track,
            segment or point list, or an ``<extensions>`` block lacks the
            TrackPointExtension/hr shape.
    """
    track = find_child(_gpx_root(root), "trk")
    if track is None:
        raise StructureMismatch("GPX document has no <trk> element")
    segment = find_child(track, "trkseg")
    if segment is None:
        raise StructureMismatch("First <trk> has no <trkseg> element")
    points = find_children(segment, "trkpt")
    if not points:
        raise StructureMismatch("First <trkseg> has no <trkpt> elements")

    # One parser per document; building it per point dominates the run time
    parser = _date_parser()
    track_points = [_track_point(point, parser, tz, timestamp_format) for point in points]
    logger.debug("Projected %d track points", len(track_points))
    return track_points


def project_metadata(root: ET.Element) -> Metadata:
    """Project the ``<metadata>`` block of a parsed GPX tree.

    A document without a metadata block yields a Metadata with every field
    ``None``. The author is the text content of the ``<author>`` node itself.
    """
    metadata = find_child(_gpx_root(root), "metadata")
    if metadata is None:
        logger.debug("No <metadata> block")
        return Metadata()

    def first_text(name: str) -> str | None:
        child = find_child(metadata, name)
        return None if child is None else child.text or ""

    author = find_child(metadata, "author")
    return Metadata(
        name=first_text("name"),
        description=first_text("desc"),
        author=None if author is None else " ".join("".join(author.itertext()).split()),
    )


def get_track_points(
    path: str,
    tz: tzinfo | None = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> list[TrackPoint]:
    """Read the GPX file at *path* and return its track points."""
    root = parse_document(read_document(path), path)
    return project_track_points(root, tz, timestamp_format)


def get_metadata(path: str) -> Metadata:
    """Read the GPX file at *path* and return its metadata."""
    return project_metadata(parse_document(read_document(path), path))


async def get_track_points_async(
    path: str,
    tz: tzinfo | None = None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> list[TrackPoint]:
    """Async variant of ``get_track_points``; the file read runs in a thread."""
    text = await asyncio.to_thread(read_document, path)
    return project_track_points(parse_document(text, path), tz, timestamp_format)


async def get_metadata_async(path: str) -> Metadata:
    """Async variant of ``get_metadata``; the file read runs in a thread."""
    text = await asyncio.to_thread(read_document, path)
    return project_metadata(parse_document(text, path))
