"""The docProps/app.xml (extended properties) part of a workbook package."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

logger = logging.getLogger(__name__)

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
_EXTENDED_NS = "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
_VT_NS = "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes"
_VALID_KEYS = ("manager", "company")


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


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
        logger.warning("error reading doc props app file: %s", exc)


def _text_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


class DocPropsApp:
    """Application-specific document properties: titles of parts, heading pairs, manager and company."""

    def __init__(self) -> None:
        self.titles_of_parts: list[str] = []
        self.heading_pairs: list[tuple[str, int]] = []
        self._properties: dict[str, str] = {}

    def add_part_title(self, title: str) -> None:
        self.titles_of_parts.append(title)

    def add_heading_pair(self, name: str, value: int) -> None:
        self.heading_pairs.append((name, value))

    def set_property(self, name: str, value: str) -> None:
        """Set "manager" or "company"; an empty value removes it."""
        if name not in _VALID_KEYS:
            raise ValueError(f"unsupported app property: {name!r}")
        if value:
            self._properties[name] = value
        else:
            self._properties.pop(name, None)

    def get_property(self, name: str) -> str:
        return self._properties.get(name, "")

    def property_names(self) -> list[str]:
        return sorted(self._properties)

    def save_to_xml(self) -> bytes:
        root = ET.Element("Properties", {"xmlns": _EXTENDED_NS, "xmlns:vt": _VT_NS})
        _text_element(root, "Application", "Microsoft Excel")
        _text_element(root, "DocSecurity", "0")
        _text_element(root, "ScaleCrop", "false")

        headings = ET.SubElement(root, "HeadingPairs")
        vector = ET.SubElement(
            headings, "vt:vector", {"size": str(len(self.heading_pairs) * 2), "baseType": "variant"}
        )
        for name, value in self.heading_pairs:
            _text_element(ET.SubElement(vector, "vt:variant"), "vt:lpstr", name)
            _text_element(ET.SubElement(vector, "vt:variant"), "vt:i4", str(value))

        titles = ET.SubElement(root, "TitlesOfParts")
        vector = ET.SubElement(
            titles, "vt:vector", {"size": str(len(self.titles_of_parts)), "baseType": "lpstr"}
        )
        for title in self.titles_of_parts:
            _text_element(vector, "vt:lpstr", title)

        if "manager" in self._properties:
            _text_element(root, "Manager", self._properties["manager"])
        # Excel always writes a Company element, even when empty.
        _text_element(root, "Company", self._properties.get("company", ""))
        _text_element(root, "LinksUpToDate", "false")
        _text_element(root, "SharedDoc", "false")
        _text_element(root, "HyperlinksChanged", "false")
        _text_element(root, "AppVersion", "12.0000")
        return (_XML_HEADER + ET.tostring(root, encoding="unicode")).encode("utf-8")

    def load_from_xml(self, data: bytes | str) -> None:
        """Read manager and company from XML; malformed input is read up to the error."""
        for element in _end_elements(data):
            name = _local_name(element.tag)
            if name == "Manager":
                self.set_property("manager", element.text or "")
            elif name == "Company":
                self.set_property("company", element.text or "")