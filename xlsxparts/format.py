"""Cell formats: number format, font, alignment, border, fill and protection."""

from __future__ import annotations

import re
from enum import IntEnum

from .formatbase import FormatBase, FormatProperty
from .numformat import is_date_time

_DEFAULT_FONT_NAME = "Calibri"
_COLOR_RE = re.compile(r"^#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


class FontScript(IntEnum):
    NORMAL = 0
    SUPER = 1
    SUB = 2


class FontUnderline(IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2
    SINGLE_ACCOUNTING = 3
    DOUBLE_ACCOUNTING = 4


class HorizontalAlignment(IntEnum):
    GENERAL = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3
    FILL = 4
    JUSTIFY = 5
    MERGE = 6
    DISTRIBUTED = 7


class VerticalAlignment(IntEnum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2
    JUSTIFY = 3
    DISTRIBUTED = 4


class BorderStyle(IntEnum):
    NONE = 0
    THIN = 1
    MEDIUM = 2
    DASHED = 3
    DOTTED = 4
    THICK = 5
    DOUBLE = 6
    HAIR = 7
    MEDIUM_DASHED = 8
    DASH_DOT = 9
    MEDIUM_DASH_DOT = 10
    DASH_DOT_DOT = 11
    MEDIUM_DASH_DOT_DOT = 12
    SLANT_DASH_DOT = 13


class DiagonalBorderType(IntEnum):
    NONE = 0
    DOWN = 1
    UP = 2
    BOTH = 3


class FillPattern(IntEnum):
    NONE = 0
    SOLID = 1
    MEDIUM_GRAY = 2
    DARK_GRAY = 3
    LIGHT_GRAY = 4
    DARK_HORIZONTAL = 5
    DARK_VERTICAL = 6
    DARK_DOWN = 7
    DARK_UP = 8
    DARK_GRID = 9
    DARK_TRELLIS = 10
    LIGHT_HORIZONTAL = 11
    LIGHT_VERTICAL = 12
    LIGHT_DOWN = 13
    LIGHT_UP = 14
    LIGHT_TRELLIS = 15
    GRAY125 = 16
    GRAY0625 = 17
    LIGHT_GRID = 18


def _normalize_color(color: str | None) -> str | None:
    """Return a colour as "#RRGGBB" or "#AARRGGBB" in upper case; None means no colour."""
    if color is None:
        return None
    match = _COLOR_RE.match(color)
    if match is None:
        raise ValueError(f"invalid colour: {color!r}")
    return "#" + match.group(1).upper()


# Built-in number format ids that denote dates and times.
_DATE_TIME_IDS = (range(14, 23), range(45, 48), range(27, 37), range(50, 59))

P = FormatProperty


class Format(FormatBase):
    """The formatting of a cell, as stored in a workbook's style tables."""

    # -- number format --------------------------------------------------

    @property
    def number_format_index(self) -> int:
        return self.int_property(P.NUMFMT_ID, 0)

    @property
    def number_format(self) -> str:
        """The custom number format code; may be empty for built-in formats."""
        return self.string_property(P.NUMFMT_FORMAT_CODE)

    def set_number_format(self, format_code: str, format_id: int | None = None) -> None:
        """Set a number format code; with `format_id` both id and code are stored."""
        if format_id is not None:
            self.set_property(P.NUMFMT_ID, format_id)
            self.set_property(P.NUMFMT_FORMAT_CODE, format_code)
            return
        if not format_code:
            return
        self.set_property(P.NUMFMT_FORMAT_CODE, format_code)
        self.clear_property(P.NUMFMT_ID)  # the id must be generated again

    def set_number_format_index(self, index: int) -> None:
        """Use a built-in or previously registered number format id."""
        self.set_property(P.NUMFMT_ID, index)
        self.clear_property(P.NUMFMT_FORMAT_CODE)

    def fix_number_format(self, format_id: int, format_code: str) -> None:
        """Record the id and code that the style tables assigned to this format."""
        self.set_property(P.NUMFMT_ID, format_id, 0)
        self.set_property(P.NUMFMT_FORMAT_CODE, format_code, "")

    def is_date_time_format(self) -> bool:
        """Return True if the number format probably shows a date or time."""
        if self.has_property(P.NUMFMT_FORMAT_CODE):
            return is_date_time(self.number_format)
        if self.has_property(P.NUMFMT_ID):
            index = self.number_format_index
            return any(index in ids for ids in _DATE_TIME_IDS)
        return False

    def has_num_fmt_data(self) -> bool:
        if not self.is_valid():
            return False
        return self.has_property(P.NUMFMT_ID) or self.has_property(P.NUMFMT_FORMAT_CODE)

    # -- font -----------------------------------------------------------

    @property
    def font_size(self) -> int:
        return self.int_property(P.FONT_SIZE)

    def set_font_size(self, size: int) -> None:
        self.set_property(P.FONT_SIZE, size, 0)

    @property
    def font_bold(self) -> bool:
        return self.bool_property(P.FONT_BOLD)

    def set_font_bold(self, bold: bool) -> None:
        self.set_property(P.FONT_BOLD, bool(bold), False)

    @property
    def font_italic(self) -> bool:
        return self.bool_property(P.FONT_ITALIC)

    def set_font_italic(self, italic: bool) -> None:
        self.set_property(P.FONT_ITALIC, bool(italic), False)

    @property
    def font_strike_out(self) -> bool:
        return self.bool_property(P.FONT_STRIKE_OUT)

    def set_font_strike_out(self, strike_out: bool) -> None:
        self.set_property(P.FONT_STRIKE_OUT, bool(strike_out), False)

    @property
    def font_outline(self) -> bool:
        return self.bool_property(P.FONT_OUTLINE)

    def set_font_outline(self, outline: bool) -> None:
        self.set_property(P.FONT_OUTLINE, bool(outline), False)

    @property
    def font_color(self) -> str | None:
        return self._color(P.FONT_COLOR)

    def set_font_color(self, color: str | None) -> None:
        self.set_property(P.FONT_COLOR, _normalize_color(color), None)

    @property
    def font_name(self) -> str:
        return self.string_property(P.FONT_NAME, _DEFAULT_FONT_NAME)

    def set_font_name(self, name: str) -> None:
        self.set_property(P.FONT_NAME, name, _DEFAULT_FONT_NAME)

    @property
    def font_script(self) -> FontScript:
        return FontScript(self.int_property(P.FONT_SCRIPT))

    def set_font_script(self, script: FontScript) -> None:
        self.set_property(P.FONT_SCRIPT, int(script), int(FontScript.NORMAL))

    @property
    def font_underline(self) -> FontUnderline:
        return FontUnderline(self.int_property(P.FONT_UNDERLINE))

    def set_font_underline(self, underline: FontUnderline) -> None:
        self.set_property(P.FONT_UNDERLINE, int(underline), int(FontUnderline.NONE))

    # -- alignment ------------------------------------------------------

    @property
    def horizontal_alignment(self) -> HorizontalAlignment:
        return HorizontalAlignment(self.int_property(P.ALIGNMENT_ALIGN_H, HorizontalAlignment.GENERAL))

    def set_horizontal_alignment(self, align: HorizontalAlignment) -> None:
        h = HorizontalAlignment
        if self.has_property(P.ALIGNMENT_INDENT) and align not in (
            h.GENERAL, h.LEFT, h.RIGHT, h.DISTRIBUTED
        ):
            self.clear_property(P.ALIGNMENT_INDENT)
        if self.has_property(P.ALIGNMENT_SHRINK_TO_FIT) and align in (h.FILL, h.JUSTIFY, h.DISTRIBUTED):
            self.clear_property(P.ALIGNMENT_SHRINK_TO_FIT)
        self.set_property(P.ALIGNMENT_ALIGN_H, int(align), int(h.GENERAL))

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        return VerticalAlignment(self.int_property(P.ALIGNMENT_ALIGN_V, VerticalAlignment.BOTTOM))

    def set_vertical_alignment(self, align: VerticalAlignment) -> None:
        self.set_property(P.ALIGNMENT_ALIGN_V, int(align), int(VerticalAlignment.BOTTOM))

    @property
    def text_wrap(self) -> bool:
        return self.bool_property(P.ALIGNMENT_WRAP)

    def set_text_wrap(self, wrap: bool) -> None:
        if wrap and self.has_property(P.ALIGNMENT_SHRINK_TO_FIT):
            self.clear_property(P.ALIGNMENT_SHRINK_TO_FIT)
        self.set_property(P.ALIGNMENT_WRAP, bool(wrap), False)

    @property
    def rotation(self) -> int:
        return self.int_property(P.ALIGNMENT_ROTATION)

    def set_rotation(self, rotation: int) -> None:
        """Set the text rotation: 0 to 180, or 255 for vertical text."""
        self.set_property(P.ALIGNMENT_ROTATION, rotation, 0)

    @property
    def indent(self) -> int:
        return self.int_property(P.ALIGNMENT_INDENT)

    def set_indent(self, indent: int) -> None:
        """Set the indentation level (at most 15); forces left alignment where needed."""
        h = HorizontalAlignment
        if indent and self.has_property(P.ALIGNMENT_ALIGN_H):
            if self.horizontal_alignment not in (h.GENERAL, h.LEFT, h.RIGHT, h.JUSTIFY):
                self.set_horizontal_alignment(h.LEFT)
        self.set_property(P.ALIGNMENT_INDENT, indent, 0)

    @property
    def shrink_to_fit(self) -> bool:
        return self.bool_property(P.ALIGNMENT_SHRINK_TO_FIT)

    def set_shrink_to_fit(self, shrink: bool) -> None:
        h = HorizontalAlignment
        if shrink and self.has_property(P.ALIGNMENT_WRAP):
            self.clear_property(P.ALIGNMENT_WRAP)
        if shrink and self.has_property(P.ALIGNMENT_ALIGN_H):
            if self.horizontal_alignment in (h.FILL, h.JUSTIFY, h.DISTRIBUTED):
                self.set_horizontal_alignment(h.LEFT)
        self.set_property(P.ALIGNMENT_SHRINK_TO_FIT, bool(shrink), False)

    # -- borders --------------------------------------------------------

    def _border_style(self, pid: FormatProperty) -> BorderStyle:
        return BorderStyle(self.int_property(pid))

    def _set_border_style(self, pid: FormatProperty, style: BorderStyle) -> None:
        self.set_property(pid, int(style), int(BorderStyle.NONE))

    def _color(self, pid: FormatProperty) -> str | None:
        value = self.get_property(pid)
        return value if isinstance(value, str) else None

    def _set_color(self, pid: FormatProperty, color: str | None) -> None:
        self.set_property(pid, _normalize_color(color), None)

    def set_border_style(self, style: BorderStyle) -> None:
        """Set the left, right, bottom and top border styles at once."""
        for pid in (P.BORDER_LEFT_STYLE, P.BORDER_RIGHT_STYLE, P.BORDER_BOTTOM_STYLE, P.BORDER_TOP_STYLE):
            self._set_border_style(pid, style)

    def set_border_color(self, color: str | None) -> None:
        """Set the left, right, top and bottom border colours at once."""
        for pid in (P.BORDER_LEFT_COLOR, P.BORDER_RIGHT_COLOR, P.BORDER_TOP_COLOR, P.BORDER_BOTTOM_COLOR):
            self._set_color(pid, color)

    left_border_style = property(
        lambda self: self._border_style(P.BORDER_LEFT_STYLE),
        lambda self, style: self._set_border_style(P.BORDER_LEFT_STYLE, style),
    )
    right_border_style = property(
        lambda self: self._border_style(P.BORDER_RIGHT_STYLE),
        lambda self, style: self._set_border_style(P.BORDER_RIGHT_STYLE, style),
    )
    top_border_style = property(
        lambda self: self._border_style(P.BORDER_TOP_STYLE),
        lambda self, style: self._set_border_style(P.BORDER_TOP_STYLE, style),
    )
    bottom_border_style = property(
        lambda self: self._border_style(P.BORDER_BOTTOM_STYLE),
        lambda self, style: self._set_border_style(P.BORDER_BOTTOM_STYLE, style),
    )
    diagonal_border_style = property(
        lambda self: self._border_style(P.BORDER_DIAGONAL_STYLE),
        lambda self, style: self._set_border_style(P.BORDER_DIAGONAL_STYLE, style),
    )
    left_border_color = property(
        lambda self: self._color(P.BORDER_LEFT_COLOR),
        lambda self, color: self._set_color(P.BORDER_LEFT_COLOR, color),
    )
    right_border_color = property(
        lambda self: self._color(P.BORDER_RIGHT_COLOR),
        lambda self, color: self._set_color(P.BORDER_RIGHT_COLOR, color),
    )
    top_border_color = property(
        lambda self: self._color(P.BORDER_TOP_COLOR),
        lambda self, color: self._set_color(P.BORDER_TOP_COLOR, color),
    )
    bottom_border_color = property(
        lambda self: self._color(P.BORDER_BOTTOM_COLOR),
        lambda self, color: self._set_color(P.BORDER_BOTTOM_COLOR, color),
    )
    diagonal_border_color = property(
        lambda self: self._color(P.BORDER_DIAGONAL_COLOR),
        lambda self, color: self._set_color(P.BORDER_DIAGONAL_COLOR, color),
    )

    @property
    def diagonal_border_type(self) -> DiagonalBorderType:
        return DiagonalBorderType(self.int_property(P.BORDER_DIAGONAL_TYPE))

    @diagonal_border_type.setter
    def diagonal_border_type(self, border_type: DiagonalBorderType) -> None:
        self.set_property(P.BORDER_DIAGONAL_TYPE, int(border_type), int(DiagonalBorderType.NONE))

    # -- fill -----------------------------------------------------------

    @property
    def fill_pattern(self) -> FillPattern:
        return FillPattern(self.int_property(P.FILL_PATTERN, FillPattern.NONE))

    def set_fill_pattern(self, pattern: FillPattern) -> None:
        self.set_property(P.FILL_PATTERN, int(pattern), int(FillPattern.NONE))

    @property
    def pattern_foreground_color(self) -> str | None:
        return self._color(P.FILL_FG_COLOR)

    def set_pattern_foreground_color(self, color: str | None) -> None:
        """Set the pattern foreground colour; a solid pattern is chosen if none is set."""
        normalized = _normalize_color(color)
        if normalized is not None and not self.has_property(P.FILL_PATTERN):
            self.set_fill_pattern(FillPattern.SOLID)
        self.set_property(P.FILL_FG_COLOR, normalized, None)

    @property
    def pattern_background_color(self) -> str | None:
        return self._color(P.FILL_BG_COLOR)

    def set_pattern_background_color(self, color: str | None) -> None:
        """Set the pattern background colour; a solid pattern is chosen if none is set."""
        normalized = _normalize_color(color)
        if normalized is not None and not self.has_property(P.FILL_PATTERN):
            self.set_fill_pattern(FillPattern.SOLID)
        self.set_property(P.FILL_BG_COLOR, normalized, None)

    # -- protection -----------------------------------------------------

    @property
    def hidden(self) -> bool:
        return self.bool_property(P.PROTECTION_HIDDEN)

    def set_hidden(self, hidden: bool) -> None:
        self.set_property(P.PROTECTION_HIDDEN, bool(hidden))

    @property
    def locked(self) -> bool:
        return self.bool_property(P.PROTECTION_LOCKED)

    def set_locked(self, locked: bool) -> None:
        self.set_property(P.PROTECTION_LOCKED, bool(locked))