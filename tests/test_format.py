import pytest

from xlsxparts.format import (
    BorderStyle,
    FillPattern,
    FontScript,
    FontUnderline,
    Format,
    HorizontalAlignment,
    VerticalAlignment,
)
from xlsxparts.formatbase import FormatProperty


def test_new_format_is_invalid_and_empty():
    fmt = Format()
    assert not fmt.is_valid()
    assert fmt.is_empty()
    assert not fmt.has_num_fmt_data()


def test_defaults():
    fmt = Format()
    assert fmt.font_name == "Calibri"
    assert fmt.vertical_alignment is VerticalAlignment.BOTTOM
    assert fmt.horizontal_alignment is HorizontalAlignment.GENERAL
    assert fmt.fill_pattern is FillPattern.NONE
    assert fmt.font_color is None


@pytest.mark.parametrize("index", [14, 22, 45, 47, 27, 36, 50, 58])
def test_builtin_date_time_ids(index):
    fmt = Format()
    fmt.set_number_format_index(index)
    assert fmt.is_date_time_format()


@pytest.mark.parametrize("index", [1, 13, 23, 44, 48, 59])
def test_builtin_non_date_ids(index):
    fmt = Format()
    fmt.set_number_format_index(index)
    assert not fmt.is_date_time_format()


def test_custom_code_date_detection():
    fmt = Format()
    fmt.set_number_format("yyyy-mm-dd")
    assert fmt.is_date_time_format()
    fmt.set_number_format("0.00")
    assert not fmt.is_date_time_format()


def test_set_number_format_clears_id_and_index_clears_code():
    fmt = Format()
    fmt.set_number_format_index(14)
    fmt.set_number_format("0.00")
    assert not fmt.has_property(FormatProperty.NUMFMT_ID)
    assert fmt.number_format == "0.00"
    fmt.set_number_format_index(2)
    assert fmt.number_format == ""
    assert fmt.number_format_index == 2


def test_empty_number_format_is_ignored():
    fmt = Format()
    fmt.set_number_format("")
    assert fmt.is_empty()


def test_number_format_with_id_and_fix():
    fmt = Format()
    fmt.set_number_format("0.000", 164)
    assert (fmt.number_format_index, fmt.number_format) == (164, "0.000")
    assert fmt.has_num_fmt_data()
    fixed = Format()
    fixed.fix_number_format(170, "#,##0")
    assert (fixed.number_format_index, fixed.number_format) == (170, "#,##0")


def test_font_properties_round_trip():
    fmt = Format()
    fmt.set_font_size(14)
    fmt.set_font_bold(True)
    fmt.set_font_italic(True)
    fmt.set_font_strike_out(True)
    fmt.set_font_outline(True)
    fmt.set_font_name("Arial")
    fmt.set_font_script(FontScript.SUPER)
    fmt.set_font_underline(FontUnderline.DOUBLE)
    fmt.set_font_color("#FF0000")
    assert fmt.font_size == 14
    assert fmt.font_bold and fmt.font_italic and fmt.font_strike_out and fmt.font_outline
    assert fmt.font_name == "Arial"
    assert fmt.font_script is FontScript.SUPER
    assert fmt.font_underline is FontUnderline.DOUBLE
    assert fmt.font_color == "#FF0000"
    assert fmt.has_font_data()


def test_clear_values_remove_properties():
    fmt = Format()
    fmt.set_font_bold(True)
    fmt.set_font_bold(False)
    fmt.set_font_name("Calibri")
    fmt.set_font_size(0)
    assert not fmt.has_font_data()
    assert fmt.is_empty()


def test_colour_is_normalized_and_invalid_raises():
    fmt = Format()
    fmt.set_font_color("ff00aa")
    assert fmt.font_color == "#FF00AA"
    with pytest.raises(ValueError):
        fmt.set_font_color("red")


def test_indent_forces_left_alignment():
    fmt = Format()
    fmt.set_horizontal_alignment(HorizontalAlignment.CENTER)
    fmt.set_indent(2)
    assert fmt.horizontal_alignment is HorizontalAlignment.LEFT
    assert fmt.indent == 2


def test_alignment_clears_indent_and_shrink():
    fmt = Format()
    fmt.set_indent(3)
    fmt.set_shrink_to_fit(True)
    fmt.set_horizontal_alignment(HorizontalAlignment.FILL)
    assert not fmt.has_property(FormatProperty.ALIGNMENT_INDENT)
    assert not fmt.shrink_to_fit


def test_wrap_and_shrink_exclude_each_other():
    fmt = Format()
    fmt.set_text_wrap(True)
    fmt.set_shrink_to_fit(True)
    assert not fmt.text_wrap and fmt.shrink_to_fit
    fmt.set_text_wrap(True)
    assert fmt.text_wrap and not fmt.shrink_to_fit


def test_shrink_resets_justify_to_left():
    fmt = Format()
    fmt.set_horizontal_alignment(HorizontalAlignment.JUSTIFY)
    fmt.set_shrink_to_fit(True)
    assert fmt.horizontal_alignment is HorizontalAlignment.LEFT
    assert fmt.has_alignment_data()


def test_rotation_and_vertical():
    fmt = Format()
    fmt.set_rotation(45)
    fmt.set_vertical_alignment(VerticalAlignment.TOP)
    assert fmt.rotation == 45
    assert fmt.vertical_alignment is VerticalAlignment.TOP


def test_border_style_and_color_apply_to_all_sides():
    fmt = Format()
    fmt.set_border_style(BorderStyle.THIN)
    fmt.set_border_color("#00FF00")
    sides = [fmt.left_border_style, fmt.right_border_style, fmt.top_border_style, fmt.bottom_border_style]
    assert sides == [BorderStyle.THIN] * 4
    colours = [fmt.left_border_color, fmt.right_border_color, fmt.top_border_color, fmt.bottom_border_color]
    assert colours == ["#00FF00"] * 4
    assert fmt.diagonal_border_style is BorderStyle.NONE
    assert fmt.has_border_data()


def test_pattern_colour_chooses_solid_fill():
    fmt = Format()
    fmt.set_pattern_foreground_color("#123456")
    assert fmt.fill_pattern is FillPattern.SOLID
    other = Format()
    other.set_fill_pattern(FillPattern.DARK_GRID)
    other.set_pattern_background_color("#123456")
    assert other.fill_pattern is FillPattern.DARK_GRID
    assert other.pattern_background_color == "#123456"
    assert other.has_fill_data()


def test_protection():
    fmt = Format()
    fmt.set_locked(False)
    fmt.set_hidden(True)
    assert fmt.hidden and not fmt.locked
    assert fmt.has_protection_data()


def test_equality_by_properties():
    a, b = Format(), Format()
    a.set_font_bold(True)
    a.set_font_size(12)
    b.set_font_size(12)
    b.set_font_bold(True)
    assert a == b
    b.set_font_italic(True)
    assert not (a == b)


def test_font_key_ignores_fill_changes():
    fmt = Format()
    fmt.set_font_bold(True)
    key = fmt.font_key()
    fmt.set_fill_pattern(FillPattern.SOLID)
    assert fmt.font_key() == key
    fmt.set_font_italic(True)
    assert fmt.font_key() != key


def test_merge_format():
    base = Format()
    base.set_font_bold(True)
    modifier = Format()
    modifier.set_font_size(20)
    base.merge_format(modifier)
    assert base.font_bold and base.font_size == 20