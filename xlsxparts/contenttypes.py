"""The [Content_Types].xml part of a workbook package."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

logger = logging.getLogger(__name__)

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/content-types"
_PACKAGE_PREFIX = "application/vnd.openxmlformats-package."
_DOCUMENT_PREFIX = "application/vnd.openxmlformats-officedocument."


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _start_elements(data: bytes | str) -> Iterator[ET.Element]:
    parser = ET.XMLPullParser(events=("start",))
    try:
        parser.feed(data)
        for _, element in parser.read_events():
            yield element
        parser.close()
        for _, element in parser.read_events():
            yield element
    except ET.ParseError as exc:
        logger.warning("error reading content types: %s", exc)


class ContentTypes:
    """Default (by extension) and override (by part name) content types."""

    def __init__(self) -> None:
        self.defaults: dict[str, str] = {
            "rels": _PACKAGE_PREFIX + "relationships+xml",
            "xml": "application/xml",
        }
        self.overrides: dict[str, str] = {}

    def add_default(self, key: str, value: str) -> None:
        self.defaults[key] = value

    def add_override(self, key: str, value: str) -> None:
        self.overrides[key] = value

    def add_doc_prop_app(self) -> None:
        self.add_override("/docProps/app.xml", _DOCUMENT_PREFIX + "extended-properties+xml")

    def add_doc_prop_core(self) -> None:
        self.add_override("/docProps/core.xml", _PACKAGE_PREFIX + "core-properties+xml")

    def add_styles(self) -> None:
        self.add_override("/xl/styles.xml", _DOCUMENT_PREFIX + "spreadsheetml.styles+xml")

    def add_theme(self) -> None:
        self.add_override("/xl/theme/theme1.xml", _DOCUMENT_PREFIX + "theme+xml")

    def add_workbook(self) -> None:
        self.add_override("/xl/workbook.xml", _DOCUMENT_PREFIX + "spreadsheetml.sheet.main+xml")

    def add_worksheet_name(self, name: str) -> None:
        self.add_override(f"/xl/worksheets/{name}.xml", _DOCUMENT_PREFIX + "spreadsheetml.worksheet+xml")

    def add_chartsheet_name(self, name: str) -> None:
        self.add_override(f"/xl/chartsheets/{name}.xml", _DOCUMENT_PREFIX + "spreadsheetml.chartsheet+xml")

    def add_drawing_name(self, name: str) -> None:
        self.add_override(f"/xl/drawings/{name}.xml", _DOCUMENT_PREFIX + "drawing+xml")

    def add_chart_name(self, name: str) -> None:
        self.add_override(f"/xl/charts/{name}.xml", _DOCUMENT_PREFIX + "drawingml.chart+xml")

    def add_comment_name(self, name: str) -> None:
        self.add_override(f"/xl/{name}.xml", _DOCUMENT_PREFIX + "spreadsheetml.comments+xml")

    def add_table_name(self, name: str) -> None:
        self.add_override(f"/xl/tables/{name}.xml", _DOCUMENT_PREFIX + "spreadsheetml.table+xml")

    def add_external_link_name(self, name: str) -> None:
        self.add_override(
            f"/xl/externalLinks/{name}.xml", _DOCUMENT_PREFIX + "spreadsheetml.externalLink+xml"
        )

    def add_shared_string(self) -> None:
        self.add_override("/xl/sharedStrings.xml", _DOCUMENT_PREFIX + "spreadsheetml.sharedStrings+xml")

    def add_vml_name(self) -> None:
        self.add_override("vml", _DOCUMENT_PREFIX + "vmlDrawing")

    def add_calc_chain(self) -> None:
        self.add_override("/xl/calcChain.xml", _DOCUMENT_PREFIX + "spreadsheetml.calcChain+xml")

    def add_vba_project(self) -> None:
        self.add_override("bin", "application/vnd.ms-office.vbaProject")

    def clear_overrides(self) -> None:
        self.overrides.clear()

    def save_to_xml(self) -> bytes:
        """Serialise to UTF-8 XML, entries sorted by key."""
        root = ET.Element("Types", {"xmlns": _NAMESPACE})
        for extension, content_type in sorted(self.defaults.items()):
            ET.SubElement(root, "Default", {"Extension": extension, "ContentType": content_type})
        for part_name, content_type in sorted(self.overrides.items()):
            ET.SubElement(root, "Override", {"PartName": part_name, "ContentType": content_type})
        return (_XML_HEADER + ET.tostring(root, encoding="unicode")).encode("utf-8")

    def load_from_xml(self, data: bytes | str) -> None:
        """Replace all entries with those read from XML; malformed input is read up to the error."""
        self.defaults.clear()
        self.overrides.clear()
        for element in _start_elements(data):
            name = _local_name(element.tag)
            if name == "Default":
                self.defaults[element.get("Extension", "")] = element.get("ContentType", "")
            elif name == "Override":
                self.overrides[element.get("PartName", "")] = element.get("ContentType", "")