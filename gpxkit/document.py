"""Reading GPX files from disk and parsing them into an element tree.

Plain ``.gpx`` files are read as UTF-8 text. Compressed exports
(``.gpx.gz``) are gunzipped first and have leading whitespace stripped,
since some exporters pad the XML declaration.
"""

import gzip
import logging
import xml.etree.ElementTree as ET

from .errors import DocumentUnreadable, MalformedDocument

logger = logging.getLogger(__name__)


def read_document(path: str) -> str:
    """Return the text of the GPX file at *path*.

    Raises:
        DocumentUnreadable: the file is missing, unreadable, or not valid
            UTF-8 / gzip data.
    """
    is_gzipped = str(path).lower().endswith(".gz")
    try:
        if is_gzipped:
            with gzip.open(path, "rb") as f:
                text = f.read().decode("utf-8-sig").lstrip()
        else:
            with open(path, encoding="utf-8-sig") as f:
                text = f.read()
    except (OSError, UnicodeDecodeError, EOFError) as exc:
        raise DocumentUnreadable(str(path), str(exc)) from exc

    logger.debug("Read %d characters from %s (gzip=%s)", len(text), path, is_gzipped)
    return text


def parse_document(text: str, path: str | None = None) -> ET.Element:
    """Parse GPX text and return the root element.

    Raises:
        MalformedDocument: *text* is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MalformedDocument(str(exc), path) from exc
    logger.debug("Parsed document root <%s>", local_name(root.tag))
    return root


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part from an element tag."""
    return tag.rsplit("}", 1)[-1]


def find_child(element: ET.Element | None, name: str) -> ET.Element | None:
    """Return the first direct child of *element* with local name *name*.

    Namespaces are ignored so GPX 1.0, GPX 1.1 and vendor extension
    namespaces all match. ``None`` is passed through.
    """
    if element is None:
        return None
    for child in element:
        if isinstance(child.tag, str) and local_name(child.tag) == name:
            return child
    return None


def find_children(element: ET.Element, name: str) -> list[ET.Element]:
    """Return all direct children of *element* with local name *name*, in order."""
    return [child for child in element if isinstance(child.tag, str) and local_name(child.tag) == name]
