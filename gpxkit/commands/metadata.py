"""CLI command: metadata — show the name, description and author of a GPX file."""

import dataclasses
import json

from tabulate import tabulate

from gpxkit.errors import GpxKitError
from gpxkit.formats.gpx import get_metadata


def run(path: str, as_json: bool = False) -> int:
    """Print the metadata of *path*. Returns an exit status."""
    try:
        metadata = get_metadata(path)
    except GpxKitError as e:
        print(f"Error: {e}")
        return 1

    if as_json:
        print(json.dumps(dataclasses.asdict(metadata), indent=4))
        return 0

    rows = [
        ["Name", metadata.name],
        ["Description", metadata.description],
        ["Author", metadata.author],
    ]
    rows = [[label, "—" if value is None else value] for label, value in rows]
    print(tabulate(rows, tablefmt="plain", disable_numparse=True))
    return 0
