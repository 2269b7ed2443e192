import os

import pytest

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), "fileformats", "samples")

GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1"'
    ' xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">\n'
)


@pytest.fixture
def sample_path():
    """Return the absolute path of a file in tests/fileformats/samples."""

    def _sample_path(name: str) -> str:
        return os.path.join(SAMPLES_DIR, name)

    return _sample_path


@pytest.fixture
def write_gpx(tmp_path):
    """Write a GPX document with the given body to a temp file and return its path.

    The body is wrapped in a <gpx> root declaring the GPX 1.1 and
    TrackPointExtension namespaces.
    """

    def _write_gpx(body: str, name: str = "track.gpx") -> str:
        path = tmp_path / name
        path.write_text(GPX_HEADER + body + "\n</gpx>\n", encoding="utf-8")
        return str(path)

    return _write_gpx


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Keep a developer's gpxkit_config.json or GPXKIT_CONFIG out of the tests."""
    import gpxkit.appconfig as gcfg

    monkeypatch.delenv("GPXKIT_CONFIG", raising=False)
    monkeypatch.setattr(gcfg, "_FILE_PATHS", [])
