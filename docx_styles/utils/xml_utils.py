"""Helper functions to work with WordprocessingML namespaces."""
from __future__ import annotations

from typing import Dict, Optional
from xml.etree import ElementTree as ET

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


class Namespaces:
    """Namespace prefix maps accepted by ElementTree ``find`` calls."""

    WORD: Dict[str, str] = {"w": WORD_NAMESPACE}


def parse_xml(data: bytes | str) -> ET.ElementTree:
    """Parse XML from an in-memory payload."""
    return ET.ElementTree(ET.fromstring(data))


def qualify(attr_name: str) -> str:
    """Expand a ``prefix:local`` name into ElementTree's ``{uri}local`` form."""
    prefix, local = attr_name.split(":", 1)
    return f"{{{Namespaces.WORD[prefix]}}}{local}"


def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag."""
    return tag.split("}", 1)[-1]


def get_attr(element: Optional[ET.Element], attr_name: str) -> Optional[str]:
    """Return a namespaced ``w:`` attribute of ``element`` if present."""
    if element is None:
        return None
    return element.attrib.get(qualify(attr_name))
