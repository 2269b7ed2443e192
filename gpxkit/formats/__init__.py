"""File format handlers for GPX documents."""

from .gpx import (
    DEFAULT_TIMESTAMP_FORMAT,
    get_metadata,
    get_metadata_async,
    get_track_points,
    get_track_points_async,
    project_metadata,
    project_track_points,
)

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "get_metadata",
    "get_metadata_async",
    "get_track_points",
    "get_track_points_async",
    "project_metadata",
    "project_track_points",
]
