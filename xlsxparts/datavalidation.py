"""Data validation rules for a cell or a range of cells."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum


class ValidationType(Enum):
    NONE = "none"
    WHOLE = "whole"
    DECIMAL = "decimal"
    LIST = "list"
    DATE = "date"
    TIME = "time"
    TEXT_LENGTH = "textLength"
    CUSTOM = "custom"


class ValidationOperator(Enum):
    BETWEEN = "between"
    NOT_BETWEEN = "notBetween"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"


class ErrorStyle(Enum):
    STOP = "stop"
    WARNING = "warning"
    INFORMATION = "information"


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _column_letters(col: int) -> str:
    letters = []
    while col > 0:
        col, rem = divmod(col - 1, 26)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))


def _cell_name(row: int, col: int) -> str:
    if row < 1 or col < 1:
        raise ValueError(f"invalid cell position: ({row}, {col})")
    return f"{_column_letters(col)}{row}"


def _range_name(first_row: int, first_col: int, last_row: int, last_col: int) -> str:
    first = _cell_name(first_row, first_col)
    last = _cell_name(last_row, last_col)
    return first if first == last else f"{first}:{last}"


def _strip_equals(formula: str) -> str:
    return formula[1:] if formula.startswith("=") else formula


@dataclass
class DataValidation:
    """A validation rule and the ranges it applies to."""

    validation_type: ValidationType = ValidationType.NONE
    validation_operator: ValidationOperator = ValidationOperator.BETWEEN
    formula1: str = ""
    formula2: str = ""
    allow_blank: bool = False
    error_style: ErrorStyle = ErrorStyle.STOP
    error_message: str = ""
    error_message_title: str = ""
    prompt_message: str = ""
    prompt_message_title: str = ""
    prompt_message_visible: bool = True
    error_message_visible: bool = True
    ranges: list[str] = field(default_factory=list)

    def set_formula1(self, formula: str) -> None:
        """Set the first formula, dropping a leading '='."""
        self.formula1 = _strip_equals(formula)

    def set_formula2(self, formula: str) -> None:
        """Set the second formula, dropping a leading '='."""
        self.formula2 = _strip_equals(formula)

    def set_error_message(self, error: str, title: str = "") -> None:
        self.error_message = error
        self.error_message_title = title

    def set_prompt_message(self, prompt: str, title: str = "") -> None:
        self.prompt_message = prompt
        self.prompt_message_title = title

    def add_cell(self, row: int, col: int) -> None:
        """Apply the rule to the 1-based cell (row, col)."""
        self.ranges.append(_cell_name(row, col))

    def add_range(self, cell_range: str | tuple[int, int, int, int]) -> None:
        """Apply the rule to a range given as "A1:B2" or (first_row, first_col, last_row, last_col)."""
        if isinstance(cell_range, str):
            self.ranges.append(cell_range)
        else:
            self.ranges.append(_range_name(*cell_range))

    def to_xml(self) -> ET.Element:
        """Build the <dataValidation> element."""
        element = ET.Element("dataValidation")
        if self.validation_type is not ValidationType.NONE:
            element.set("type", self.validation_type.value)
        if self.error_style is not ErrorStyle.STOP:
            element.set("errorStyle", self.error_style.value)
        if self.validation_operator is not ValidationOperator.BETWEEN:
            element.set("operator", self.validation_operator.value)
        if self.allow_blank:
            element.set("allowBlank", "1")
        if self.prompt_message_visible:
            element.set("showInputMessage", "1")
        if self.error_message_visible:
            element.set("showErrorMessage", "1")
        if self.error_message_title:
            element.set("errorTitle", self.error_message_title)
        if self.error_message:
            element.set("error", self.error_message)
        if self.prompt_message_title:
            element.set("promptTitle", self.prompt_message_title)
        if self.prompt_message:
            element.set("prompt", self.prompt_message)
        element.set("sqref", " ".join(self.ranges))
        if self.formula1:
            ET.SubElement(element, "formula1").text = self.formula1
        if self.formula2:
            ET.SubElement(element, "formula2").text = self.formula2
        return element

    @classmethod
    def from_xml(cls, element: ET.Element) -> DataValidation:
        """Read a rule from a <dataValidation> element."""
        if _local_name(element.tag) != "dataValidation":
            raise ValueError(f"expected a dataValidation element, got {element.tag!r}")
        attrs = element.attrib
        validation = cls()
        for part in attrs.get("sqref", "").split(" "):
            if part:
                validation.add_range(part)

        if "type" in attrs:
            try:
                validation.validation_type = ValidationType(attrs["type"])
            except ValueError:
                validation.validation_type = ValidationType.NONE
        if "errorStyle" in attrs:
            try:
                validation.error_style = ErrorStyle(attrs["errorStyle"])
            except ValueError:
                validation.error_style = ErrorStyle.STOP
        if "operator" in attrs:
            try:
                validation.validation_operator = ValidationOperator(attrs["operator"])
            except ValueError:
                validation.validation_operator = ValidationOperator.BETWEEN

        validation.allow_blank = "allowBlank" in attrs
        validation.prompt_message_visible = "showInputMessage" in attrs
        validation.error_message_visible = "showErrorMessage" in attrs

        error, error_title = attrs.get("error", ""), attrs.get("errorTitle", "")
        if error or error_title:
            validation.set_error_message(error, error_title)
        prompt, prompt_title = attrs.get("prompt", ""), attrs.get("promptTitle", "")
        if prompt or prompt_title:
            validation.set_prompt_message(prompt, prompt_title)

        for child in element.iter():
            name = _local_name(child.tag)
            if name == "formula1":
                validation.set_formula1(child.text or "")
            elif name == "formula2":
                validation.set_formula2(child.text or "")
        return validation