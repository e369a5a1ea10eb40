"""Extract the ProductVersion tag from PLCnext Engineer XML descriptors.

Descriptors (``additional.xml``, ``StorageProperties*.xml``) carry the IDE
version as an attribute pair on a ``Property`` element::

    <Property Key="ProductVersion" Value="2023.6" />

Producers disagree on attribute order and some files are truncated, so
extraction runs in two passes:

1. An incremental XML parse. Elements seen before a parse error still
   count; the parse simply stops at the error.
2. A byte-level regex fallback that accepts either attribute order.

Nothing here validates the shape of the returned value; callers decide
what a usable version looks like.
"""

from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET

PRODUCT_VERSION_KEY = "ProductVersion"

_KEY_THEN_VALUE = re.compile(rb'Key="ProductVersion"[^>]*Value="([^"]+)"')
_VALUE_THEN_KEY = re.compile(rb'Value="([^"]+)"[^>]*Key="ProductVersion"')


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element or attribute name."""
    return tag.rsplit("}", 1)[-1]


def find_version_in_xml(data: bytes) -> str:
    """Return the first ProductVersion found by parsing ``data`` as XML.

    Args:
        data: Raw descriptor bytes. May be malformed or truncated.

    Returns:
        The ``Value`` attribute of the first matching ``Property``
        element, or ``""`` if none was seen before the end of input or
        the first parse error.
    """
    try:
        for _event, elem in ET.iterparse(io.BytesIO(data), events=("start",)):
            if _local_name(elem.tag) != "Property":
                continue
            key = value = ""
            for attr_name, attr_value in elem.attrib.items():
                local = _local_name(attr_name)
                if local == "Key":
                    key = attr_value
                elif local == "Value":
                    value = attr_value
            if key == PRODUCT_VERSION_KEY and value:
                return value
    except ET.ParseError:
        pass
    return ""


def find_version_regex(data: bytes) -> str:
    """Scan raw bytes for a ProductVersion attribute pair in either order."""
    for pattern in (_KEY_THEN_VALUE, _VALUE_THEN_KEY):
        match = pattern.search(data)
        if match:
            return match.group(1).decode("utf-8", errors="replace")
    return ""


def extract_version(data: bytes) -> str:
    """Return the descriptor's ProductVersion, or ``""`` if it has none."""
    return find_version_in_xml(data) or find_version_regex(data)
