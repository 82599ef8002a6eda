# xlsxparts

Small, dependency-free pieces for working with the parts of an XLSX
(Office Open XML spreadsheet) package. Each module handles one part or one
concern and can be used on its own.

## Modules

- `xlsxparts.numformat.is_date_time(format_code)` tells whether a number
  format code probably shows a date or time. Bracketed `[h]`, `[m]`, `[s]`
  count as time; other bracketed blocks, quoted text and escaped characters
  are skipped; a `#` or `;` ends the search with `False`.
- `xlsxparts.mediafile.MediaFile` holds an embedded image or other media
  part: `contents`, `suffix`, `mime_type`, `file_name`, a package `index`
  set with `set_index()`, and `hash_key()`, the MD5 digest of the contents.
  `set()` replaces the content and marks the index as needing assignment.
- `xlsxparts.contenttypes.ContentTypes` builds and parses
  `[Content_Types].xml`. It starts with the `rels` and `xml` defaults and has
  `add_*` helpers for the usual parts (workbook, worksheets, chartsheets,
  drawings, charts, comments, tables, external links, shared strings, styles,
  theme, calc chain, document properties). `save_to_xml()` returns UTF-8
  bytes with entries sorted by key; `load_from_xml(data)` replaces all entries.
- `xlsxparts.docpropsapp.DocPropsApp` builds and parses `docProps/app.xml`:
  titles of parts, heading pairs, and the `manager` and `company` properties.
- `xlsxparts.docpropscore.DocPropsCore` builds and parses `docProps/core.xml`:
  `title`, `subject`, `keywords`, `description`, `category`, `status`,
  `created` and `creator`. `save_to_xml(now=None)` takes the modification
  time (also used as the creation time when `created` is unset); the creator
  defaults to `"xlsxparts"`.
- `xlsxparts.zipreader.ZipReader` opens a zip package by path or binary
  stream and offers `exists()`, `file_paths()` and `file_data(name)`
  (`b""` for a missing entry). It is a context manager.
- `xlsxparts.datavalidation.DataValidation` is a dataclass for a
  `<dataValidation>` rule with `ValidationType`, `ValidationOperator` and
  `ErrorStyle` enums, ranges given as `"A1:B2"` strings or
  `(first_row, first_col, last_row, last_col)` tuples, and `to_xml()` /
  `DataValidation.from_xml(element)` working on `xml.etree.ElementTree`
  elements.
- `xlsxparts.tagcopy.copy_tag(source, target, tag)` replaces every `tag`
  element in the `target` text with those found in the `source` text.
- `xlsxparts.stylecopy.copy_style(source_path, target_path)` rewrites a
  target package in place, copying `dxfs` from the styles part,
  `workbookPr` from the workbook part and `conditionalFormatting` from
  worksheets of the source package. It returns the paths of the merged
  entries, and raises `FileNotFoundError` if the target file is missing and
  `ValueError` if it is not a zip package.
- `xlsxparts.formatbase.FormatBase` stores format properties keyed by
  `FormatProperty`, with cached `format_key()`, `font_key()`,
  `border_key()` and `fill_key()` for comparison, style indices and
  `merge_format()`.
- `xlsxparts.format.Format` describes cell formatting on top of it: number
  formats (`is_date_time_format()` recognises built-in date ids and custom
  codes), font, alignment, borders, fill and protection, with the enums
  `FontScript`, `FontUnderline`, `HorizontalAlignment`, `VerticalAlignment`,
  `BorderStyle`, `DiagonalBorderType` and `FillPattern`. Colours are strings
  such as `"#FF0000"` and are stored in upper case.

Unsupported property names passed to `set_property()` of `DocPropsApp` or
`DocPropsCore` raise `ValueError`. Malformed XML given to the `load_from_xml`
methods is read up to the error, which is logged.

## Installation

```
pip install .
```

## Example

```python
from xlsxparts.contenttypes import ContentTypes
from xlsxparts.format import Format, HorizontalAlignment
from xlsxparts.numformat import is_date_time

types = ContentTypes()
types.add_workbook()
types.add_worksheet_name("sheet1")
xml_bytes = types.save_to_xml()

assert is_date_time("yyyy-mm-dd")
assert not is_date_time("#,##0.00")

fmt = Format()
fmt.set_font_bold(True)
fmt.set_horizontal_alignment(HorizontalAlignment.CENTER)
fmt.set_pattern_foreground_color("#ffcc00")
assert fmt.pattern_foreground_color == "#FFCC00"
```

## What it does not do

There is no workbook object: the package does not open or save a whole
spreadsheet, and it has no cells, worksheets, shared strings, style tables,
themes, drawings or charts. It gives the separate parts above, which a caller
combines with its own package handling. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```