"""Shared utility functions for the gpxkit package."""

from __future__ import annotations

import dataclasses
from typing import Any


def show_props(obj: Any, obj_name: str) -> str:
    """Describe every field of *obj*, one ``name.field = value`` line each.

    Works on dataclass instances (such as TrackPoint and Metadata) and on
    mappings. Intended for debugging output only.

    Args:
        obj: Dataclass instance or mapping to describe.
        obj_name: Prefix used for each line.

    Returns:
        The description, each line terminated by a newline.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        items = [(field.name, getattr(obj, field.name)) for field in dataclasses.fields(obj)]
    else:
        items = list(obj.items())
    return "".join(f"{obj_name}.{key} = {value}\n" for key, value in items)
