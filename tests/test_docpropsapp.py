import xml.etree.ElementTree as ET

import pytest

from xlsxparts.docpropsapp import DocPropsApp

EXT = "{http://schemas.openxmlformats.org/officeDocument/2006/extended-properties}"
VT = "{http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes}"


def test_unknown_property_raises():
    props = DocPropsApp()
    with pytest.raises(ValueError):
        props.set_property("title", "x")


def test_set_and_remove_property():
    props = DocPropsApp()
    props.set_property("manager", "Boss")
    props.set_property("company", "Acme")
    assert props.property_names() == ["company", "manager"]
    assert props.get_property("manager") == "Boss"
    props.set_property("manager", "")
    assert props.property_names() == ["company"]
    assert props.get_property("manager") == ""


def test_save_structure():
    props = DocPropsApp()
    props.add_heading_pair("Worksheets", 2)
    props.add_part_title("Sheet1")
    props.add_part_title("Sheet2")
    root = ET.fromstring(props.save_to_xml())
    assert root.tag == EXT + "Properties"
    heading_vector = root.find(f"{EXT}HeadingPairs/{VT}vector")
    assert heading_vector.get("size") == str(2 * len(props.heading_pairs))
    assert [e.text for e in heading_vector.iter(VT + "lpstr")] == ["Worksheets"]
    assert [e.text for e in heading_vector.iter(VT + "i4")] == ["2"]
    titles = root.find(f"{EXT}TitlesOfParts/{VT}vector")
    assert titles.get("size") == "2"
    assert [e.text for e in titles] == ["Sheet1", "Sheet2"]
    assert root.find(EXT + "Application").text == "Microsoft Excel"
    assert root.find(EXT + "AppVersion").text == "12.0000"


def test_company_always_written_manager_optional():
    root = ET.fromstring(DocPropsApp().save_to_xml())
    assert root.find(EXT + "Company") is not None
    assert root.find(EXT + "Manager") is None


def test_round_trip():
    props = DocPropsApp()
    props.set_property("manager", "Boss & Co")
    props.set_property("company", "Acme <Ltd>")
    loaded = DocPropsApp()
    loaded.load_from_xml(props.save_to_xml())
    assert loaded.get_property("manager") == "Boss & Co"
    assert loaded.get_property("company") == "Acme <Ltd>"


def test_load_malformed_keeps_read_values():
    props = DocPropsApp()
    props.load_from_xml("<Properties><Manager>M</Manager><Company>")
    assert props.get_property("manager") == "M"
    assert props.property_names() == ["manager"]