"""This is the init module for gpxkit"""

from .errors import DocumentUnreadable, GpxKitError, MalformedDocument, StructureMismatch
from .formats import get_metadata, get_metadata_async, get_track_points, get_track_points_async
from .records import Metadata, TrackPoint, Unparsed
from .utils import show_props

__version__ = "0.0.1"
__all__ = [
    "DocumentUnreadable",
    "GpxKitError",
    "MalformedDocument",
    "Metadata",
    "StructureMismatch",
    "TrackPoint",
    "Unparsed",
    "get_metadata",
    "get_metadata_async",
    "get_track_points",
    "get_track_points_async",
    "show_props",
]
