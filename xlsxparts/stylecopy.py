"""Copy style information from one workbook package into another."""

from __future__ import annotations

import os
import tempfile
import zipfile
from pathlib import Path

from .tagcopy import copy_tag
from .zipreader import ZipReader

# (part of the entry path, tag copied from the source into the target)
_MERGE_RULES = (
    ("xl/styles", "dxfs"),
    ("xl/workbook", "workbookPr"),
    ("xl/worksheets/sheet", "conditionalFormatting"),
)


def _merge(source_data: bytes, target_data: bytes, tag: str) -> bytes:
    source_text = source_data.decode("utf-8", errors="replace")
    target_text = target_data.decode("utf-8", errors="replace")
    return copy_tag(source_text, target_text, tag).encode("utf-8")


def _rule_for(path: str) -> str | None:
    for fragment, tag in _MERGE_RULES:
        if fragment in path:
            return tag
    return None


def copy_style(source_path: str | os.PathLike[str], target_path: str | os.PathLike[str]) -> list[str]:
    """Copy differential formats, workbook properties and conditional formatting.

    Every entry of the target package is kept; where the source package holds an
    entry with the same path, its ``dxfs`` (styles), ``workbookPr`` (workbook) or
    ``conditionalFormatting`` (worksheets) elements replace the target's own.
    The target file is rewritten in place. Returns the paths of merged entries.
    """
    target = Path(target_path)
    if not target.is_file():
        raise FileNotFoundError(f"target package not found: {target}")

    merged: list[str] = []
    with ZipReader(source_path) as source_reader, ZipReader(target) as target_reader:
        if not target_reader.exists():
            raise ValueError(f"target is not a zip package: {target}")
        source_paths = set(source_reader.file_paths())

        handle, temp_name = tempfile.mkstemp(suffix=".xlsx", dir=target.parent)
        os.close(handle)
        try:
            with zipfile.ZipFile(temp_name, "w", zipfile.ZIP_DEFLATED) as out:
                for path in target_reader.file_paths():
                    data = target_reader.file_data(path)
                    tag = _rule_for(path)
                    if tag is not None and path in source_paths:
                        data = _merge(source_reader.file_data(path), data, tag)
                        merged.append(path)
                    out.writestr(path, data)
        except BaseException:
            os.unlink(temp_name)
            raise

    os.replace(temp_name, target)
    return merged