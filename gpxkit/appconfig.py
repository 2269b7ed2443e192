"""Application configuration for the gpxkit CLI.

Configuration is read from the first JSON file found in:
  - the path named by the ``GPXKIT_CONFIG`` environment variable
  - ``gpxkit_config.json``
  - ``../gpxkit_config.json``

and merged over ``DEFAULT_CONFIG``. No config file is required. The
extraction functions never read this module; callers pass settings in
explicitly.
"""

import copy
import json
import logging
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .formats.gpx import DEFAULT_TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    # None renders timestamps in the process's local time zone
    "home_timezone": None,
    "timestamp_format": DEFAULT_TIMESTAMP_FORMAT,
    "debug": False,
}

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path("gpxkit_config.json"),
    Path("../gpxkit_config.json"),
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _candidate_paths() -> list[Path]:
    env_path = os.environ.get("GPXKIT_CONFIG")
    if env_path:
        return [Path(env_path), *_FILE_PATHS]
    return list(_FILE_PATHS)


def _load_from_file() -> dict[str, Any] | None:
    """Try each candidate path; return parsed JSON or ``None``."""
    for path in _candidate_paths():
        if not path.exists():
            continue
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", path, e)
            continue
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: top level is not an object", path)
            continue
        logger.debug("Loaded config from %s", path)
        return data
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config() -> dict[str, Any]:
    """Return the configuration: the first config file found merged over defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    file_cfg = _load_from_file()
    if file_cfg:
        config.update(file_cfg)
    return config


def get_home_tz(config: dict[str, Any]) -> tzinfo | None:
    """Return the configured time zone, or ``None`` for the process's local zone.

    Raises:
        ValueError: ``home_timezone`` names an unknown zone.
    """
    name = config.get("home_timezone")
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown home_timezone {name!r}") from e
