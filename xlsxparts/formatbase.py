"""Property storage shared by cell formats: typed values, group keys and style indices."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class FormatProperty(IntEnum):
    """Identifiers of the properties a format can hold, grouped by style record."""

    NUMFMT_ID = 0
    NUMFMT_FORMAT_CODE = 1

    FONT_SIZE = 100
    FONT_ITALIC = 101
    FONT_STRIKE_OUT = 102
    FONT_COLOR = 103
    FONT_BOLD = 104
    FONT_SCRIPT = 105
    FONT_UNDERLINE = 106
    FONT_OUTLINE = 107
    FONT_SHADOW = 108
    FONT_NAME = 109
    FONT_FAMILY = 110
    FONT_CHARSET = 111
    FONT_SCHEME = 112
    FONT_CONDENSE = 113
    FONT_EXTEND = 114

    BORDER_LEFT_STYLE = 200
    BORDER_RIGHT_STYLE = 201
    BORDER_TOP_STYLE = 202
    BORDER_BOTTOM_STYLE = 203
    BORDER_DIAGONAL_STYLE = 204
    BORDER_LEFT_COLOR = 205
    BORDER_RIGHT_COLOR = 206
    BORDER_TOP_COLOR = 207
    BORDER_BOTTOM_COLOR = 208
    BORDER_DIAGONAL_COLOR = 209
    BORDER_DIAGONAL_TYPE = 210

    FILL_PATTERN = 300
    FILL_BG_COLOR = 301
    FILL_FG_COLOR = 302

    ALIGNMENT_ALIGN_H = 400
    ALIGNMENT_ALIGN_V = 401
    ALIGNMENT_WRAP = 402
    ALIGNMENT_ROTATION = 403
    ALIGNMENT_INDENT = 404
    ALIGNMENT_SHRINK_TO_FIT = 405

    PROTECTION_LOCKED = 500
    PROTECTION_HIDDEN = 501


FONT_IDS = range(100, 200)
BORDER_IDS = range(200, 300)
FILL_IDS = range(300, 400)
ALIGNMENT_IDS = range(400, 500)


def _same(a: Any, b: Any) -> bool:
    """Equality that also requires the same type, so True and 1 differ."""
    return type(a) is type(b) and a == b


class _Group:
    """Cached key and style-table index of one property group (font, border, fill)."""

    __slots__ = ("dirty", "key", "index", "index_valid")

    def __init__(self) -> None:
        self.dirty = True
        self.key: tuple = ()
        self.index = 0
        self.index_valid = False

    def copy(self) -> _Group:
        other = _Group()
        other.dirty, other.key = self.dirty, self.key
        other.index, other.index_valid = self.index, self.index_valid
        return other


class FormatBase:
    """A set of format properties with cached comparison keys and style indices.

    A new format is invalid until a property or an index is set on it.
    """

    __hash__ = None  # mutable; compare with format_key() instead

    def __init__(self) -> None:
        self._valid = False
        self._properties: dict[int, Any] = {}
        self._dirty = True
        self._format_key: tuple = ()
        self._font = _Group()
        self._border = _Group()
        self._fill = _Group()
        self.xf_index = -1
        self.xf_index_valid = False
        self.dxf_index = -1
        self.dxf_index_valid = False
        self.theme = 0

    # -- raw properties -------------------------------------------------

    def get_property(self, property_id: int, default: Any = None) -> Any:
        return self._properties.get(int(property_id), default)

    def set_property(self, property_id: int, value: Any, clear_value: Any = None) -> None:
        """Store `value`; a value equal to `clear_value` removes the property instead."""
        self._valid = True
        pid = int(property_id)
        if not _same(value, clear_value):
            if pid in self._properties and _same(self._properties[pid], value):
                return
            self._properties[pid] = value
        else:
            if pid not in self._properties:
                return
            del self._properties[pid]

        self._dirty = True
        self.xf_index_valid = False
        self.dxf_index_valid = False
        for ids, group in ((FONT_IDS, self._font), (BORDER_IDS, self._border), (FILL_IDS, self._fill)):
            if pid in ids:
                group.dirty = True
                group.index_valid = False
                break

    def clear_property(self, property_id: int) -> None:
        self.set_property(property_id, None)

    def has_property(self, property_id: int) -> bool:
        return int(property_id) in self._properties

    def bool_property(self, property_id: int, default: bool = False) -> bool:
        value = self.get_property(property_id)
        return value if isinstance(value, bool) else default

    def int_property(self, property_id: int, default: int = 0) -> int:
        value = self.get_property(property_id)
        if isinstance(value, int) and not isinstance(value, bool):
            return int(value)
        return default

    def double_property(self, property_id: int, default: float = 0.0) -> float:
        value = self.get_property(property_id)
        return value if isinstance(value, float) else default

    def string_property(self, property_id: int, default: str = "") -> str:
        value = self.get_property(property_id)
        return value if isinstance(value, str) else default

    # -- state ----------------------------------------------------------

    def is_valid(self) -> bool:
        return self._valid

    def is_empty(self) -> bool:
        return not self._properties

    def _has_any(self, ids: range) -> bool:
        return any(pid in ids for pid in self._properties)

    def has_font_data(self) -> bool:
        return self._has_any(FONT_IDS)

    def has_alignment_data(self) -> bool:
        return self._has_any(ALIGNMENT_IDS)

    def has_border_data(self) -> bool:
        return self._has_any(BORDER_IDS)

    def has_fill_data(self) -> bool:
        return self._has_any(FILL_IDS)

    def has_protection_data(self) -> bool:
        return self.has_property(FormatProperty.PROTECTION_HIDDEN) or self.has_property(
            FormatProperty.PROTECTION_LOCKED
        )

    # -- keys -----------------------------------------------------------

    def _group_key(self, group: _Group, ids: range) -> tuple:
        if self.is_empty():
            return ()
        if group.dirty:
            group.key = tuple((pid, self._properties[pid]) for pid in sorted(self._properties) if pid in ids)
            group.dirty = False
        return group.key

    def font_key(self) -> tuple:
        return self._group_key(self._font, FONT_IDS)

    def border_key(self) -> tuple:
        return self._group_key(self._border, BORDER_IDS)

    def fill_key(self) -> tuple:
        return self._group_key(self._fill, FILL_IDS)

    def format_key(self) -> tuple:
        if self.is_empty():
            return ()
        if self._dirty:
            self._format_key = tuple((pid, self._properties[pid]) for pid in sorted(self._properties))
            self._dirty = False
        return self._format_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatBase):
            return NotImplemented
        return self.format_key() == other.format_key()

    # -- style indices --------------------------------------------------

    @property
    def font_index_valid(self) -> bool:
        return self.has_font_data() and self._font.index_valid

    @property
    def font_index(self) -> int:
        return self._font.index if self.font_index_valid else 0

    @font_index.setter
    def font_index(self, index: int) -> None:
        self._font.index = index
        self._font.index_valid = True

    @property
    def border_index_valid(self) -> bool:
        return self.has_border_data() and self._border.index_valid

    @property
    def border_index(self) -> int:
        return self._border.index if self.border_index_valid else 0

    @border_index.setter
    def border_index(self, index: int) -> None:
        self._border.index = index
        self._border.index_valid = True

    @property
    def fill_index_valid(self) -> bool:
        return self.has_fill_data() and self._fill.index_valid

    @property
    def fill_index(self) -> int:
        return self._fill.index if self.fill_index_valid else 0

    @fill_index.setter
    def fill_index(self, index: int) -> None:
        self._fill.index = index
        self._fill.index_valid = True

    def set_xf_index(self, index: int) -> None:
        self._valid = True
        self.xf_index = index
        self.xf_index_valid = True

    def set_dxf_index(self, index: int) -> None:
        self._valid = True
        self.dxf_index = index
        self.dxf_index_valid = True

    # -- merging --------------------------------------------------------

    def merge_format(self, modifier: FormatBase) -> None:
        """Apply every property of `modifier` to this format."""
        if not modifier.is_valid():
            return
        if not self.is_valid():
            self._valid = True
            self._properties = dict(modifier._properties)
            self._dirty = modifier._dirty
            self._format_key = modifier._format_key
            self._font = modifier._font.copy()
            self._border = modifier._border.copy()
            self._fill = modifier._fill.copy()
            self.xf_index, self.xf_index_valid = modifier.xf_index, modifier.xf_index_valid
            self.dxf_index, self.dxf_index_valid = modifier.dxf_index, modifier.dxf_index_valid
            self.theme = modifier.theme
            return
        for pid, value in sorted(modifier._properties.items()):
            self.set_property(pid, value)

    def __repr__(self) -> str:
        props = {FormatProperty(pid).name if pid in FormatProperty._value2member_map_ else pid: value
                 for pid, value in sorted(self._properties.items())}
        return f"{type(self).__name__}({props})"