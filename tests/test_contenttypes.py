from xlsxparts.contenttypes import ContentTypes


def test_initial_defaults():
    types = ContentTypes()
    assert types.defaults == {
        "rels": "application/vnd.openxmlformats-package.relationships+xml",
        "xml": "application/xml",
    }
    assert types.overrides == {}


def test_add_workbook_override():
    types = ContentTypes()
    types.add_workbook()
    assert types.overrides["/xl/workbook.xml"] == (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml"
    )


def test_named_overrides_use_name_in_path():
    types = ContentTypes()
    types.add_worksheet_name("sheet1")
    types.add_chart_name("chart2")
    types.add_external_link_name("externalLink1")
    assert "/xl/worksheets/sheet1.xml" in types.overrides
    assert "/xl/charts/chart2.xml" in types.overrides
    assert "/xl/externalLinks/externalLink1.xml" in types.overrides


def test_clear_overrides_keeps_defaults():
    types = ContentTypes()
    types.add_styles()
    types.add_theme()
    types.clear_overrides()
    assert types.overrides == {}
    assert "rels" in types.defaults


def test_save_header_and_sorted_order():
    types = ContentTypes()
    types.add_default("png", "image/png")
    data = types.save_to_xml()
    assert data.startswith(b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>')
    assert data.index(b'Extension="png"') < data.index(b'Extension="rels"') < data.index(b'Extension="xml"')


def test_round_trip():
    types = ContentTypes()
    types.add_default("jpeg", "image/jpeg")
    types.add_doc_prop_app()
    types.add_doc_prop_core()
    types.add_shared_string()
    types.add_vba_project()
    types.add_vml_name()
    types.add_calc_chain()
    types.add_comment_name("comments1")
    types.add_table_name("table1")
    types.add_drawing_name("drawing1")
    types.add_chartsheet_name("sheet1")
    loaded = ContentTypes()
    loaded.add_default("extra", "x/y")
    loaded.load_from_xml(types.save_to_xml())
    assert loaded.defaults == types.defaults
    assert loaded.overrides == types.overrides


def test_load_clears_previous_entries():
    types = ContentTypes()
    types.add_workbook()
    types.load_from_xml("<Types></Types>")
    assert types.defaults == {}
    assert types.overrides == {}


def test_load_malformed_keeps_entries_before_error():
    types = ContentTypes()
    types.load_from_xml('<Types><Default Extension="a" ContentType="t/a"/><Default')
    assert types.defaults == {"a": "t/a"}