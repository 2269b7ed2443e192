"""CLI command: points — list the track points of a GPX file."""

import dataclasses
import json

from tabulate import tabulate

from gpxkit.appconfig import get_home_tz, load_config
from gpxkit.errors import GpxKitError
from gpxkit.formats.gpx import DEFAULT_TIMESTAMP_FORMAT, get_track_points


def _cell(value) -> str:
    return "—" if value is None else str(value)


def run(path: str, as_json: bool = False) -> int:
    """Print the track points of *path* as a table (or JSON). Returns an exit status."""
    config = load_config()
    timestamp_format = config.get("timestamp_format") or DEFAULT_TIMESTAMP_FORMAT
    try:
        points = get_track_points(path, tz=get_home_tz(config), timestamp_format=timestamp_format)
    except (GpxKitError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if as_json:
        print(json.dumps([dataclasses.asdict(p) for p in points], indent=4))
        return 0

    rows = [
        [i, _cell(p.lat), _cell(p.lon), _cell(p.elevation), _cell(p.timestamp), _cell(p.heart_rate)]
        for i, p in enumerate(points, start=1)
    ]
    print(
        tabulate(
            rows,
            headers=["#", "Latitude", "Longitude", "Elevation", "Time", "HR"],
            tablefmt="simple",
            disable_numparse=True,
        )
    )
    print(f"\n{len(points)} track points")
    return 0
