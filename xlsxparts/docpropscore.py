"""The docProps/core.xml (core properties) part of a workbook package."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from datetime import datetime

logger = logging.getLogger(__name__)

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
CP_NS = "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"
DC_NS = "http://purl.org/dc/elements/1.1/"
DCTERMS_NS = "http://purl.org/dc/terms/"
DCMITYPE_NS = "http://purl.org/dc/dcmitype/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"

DEFAULT_CREATOR = "xlsxparts"

_VALID_KEYS = (
    "title",
    "subject",
    "keywords",
    "description",
    "category",
    "status",
    "created",
    "creator",
)

# (namespace, element name) -> property name
_LOAD_MAP = {
    (DC_NS, "subject"): "subject",
    (DC_NS, "title"): "title",
    (DC_NS, "creator"): "creator",
    (DC_NS, "description"): "description",
    (CP_NS, "keywords"): "keywords",
    (DCTERMS_NS, "created"): "created",
    (CP_NS, "category"): "category",
    (CP_NS, "contentStatus"): "status",
}


def _split_tag(tag: str) -> tuple[str, str]:
    if tag.startswith("{"):
        namespace, _, name = tag[1:].partition("}")
        return namespace, name
    return "", tag


def _end_elements(data: bytes | str) -> Iterator[ET.Element]:
    parser = ET.XMLPullParser(events=("end",))
    try:
        parser.feed(data)
        for _, element in parser.read_events():
            yield element
        parser.close()
        for _, element in parser.read_events():
            yield element
    except ET.ParseError as exc:
        logger.warning("error reading doc props core file: %s", exc)


def _iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%S")


class DocPropsCore:
    """Core document properties such as title, subject, creator and creation time."""

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}

    def set_property(self, name: str, value: str) -> None:
        """Set a core property; an empty value removes it."""
        if name not in _VALID_KEYS:
            raise ValueError(f"unsupported core property: {name!r}")
        if value:
            self._properties[name] = value
        else:
            self._properties.pop(name, None)

    def get_property(self, name: str) -> str:
        return self._properties.get(name, "")

    def property_names(self) -> list[str]:
        return sorted(self._properties)

    def save_to_xml(self, now: datetime | None = None) -> bytes:
        """Serialise to XML; `now` is the modification time (and creation time if unset)."""
        moment = _iso(now if now is not None else datetime.now())
        props = self._properties
        root = ET.Element(
            "cp:coreProperties",
            {
                "xmlns:cp": CP_NS,
                "xmlns:dc": DC_NS,
                "xmlns:dcterms": DCTERMS_NS,
                "xmlns:dcmitype": DCMITYPE_NS,
                "xmlns:xsi": XSI_NS,
            },
        )

        def text(tag: str, value: str, attrs: dict[str, str] | None = None) -> None:
            ET.SubElement(root, tag, attrs or {}).text = value

        if "title" in props:
            text("dc:title", props["title"])
        if "subject" in props:
            text("dc:subject", props["subject"])
        creator = props.get("creator", DEFAULT_CREATOR)
        text("dc:creator", creator)
        if "keywords" in props:
            text("cp:keywords", props["keywords"])
        if "description" in props:
            text("dc:description", props["description"])
        text("cp:lastModifiedBy", creator)
        w3cdtf = {"xsi:type": "dcterms:W3CDTF"}
        text("dcterms:created", props.get("created", moment), w3cdtf)
        text("dcterms:modified", moment, w3cdtf)
        if "category" in props:
            text("cp:category", props["category"])
        if "status" in props:
            text("cp:contentStatus", props["status"])
        return (_XML_HEADER + ET.tostring(root, encoding="unicode")).encode("utf-8")

    def load_from_xml(self, data: bytes | str) -> None:
        """Read core properties from XML; malformed input is read up to the error."""
        for element in _end_elements(data):
            key = _LOAD_MAP.get(_split_tag(element.tag))
            if key is not None:
                self.set_property(key, element.text or "")