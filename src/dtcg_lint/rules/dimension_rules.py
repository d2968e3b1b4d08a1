"""Dimension-shaped value rules (dimension, font sizes, spacing, radii)."""

from typing import Any

from ..classifier import is_number, is_object
from ..constants import (
    DIMENSION_PATTERN,
    DIMENSION_UNITS,
    FONT_WEIGHT_NAMES,
    LOOSE_DIMENSION_PATTERN,
    NUMBER_PATTERN,
)
from ..models import Diagnostic
from .base import ValueValidator

UNITS_HINT = f"Standard units: {', '.join(DIMENSION_UNITS)}"


class DimensionValidator(ValueValidator):
    """Validates "<number><unit>" strings and {value, unit} objects."""

    RULE_PREFIX = "DIMENSION"
    allow_numbers = False

    def __init__(self, label: str = "dimension"):
        """Initialize the validator.

        Args:
            label: Type name used in messages (e.g. "fontSize")
        """
        self.label = label

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if is_object(value):
            return self._check_object(value, path)

        if is_number(value) and self.allow_numbers:
            return []

        if not isinstance(value, str):
            return [
                self._error(
                    1,
                    path,
                    f"Invalid {self.label} value",
                    'Use formats like "16px", "2rem", "100%" or {"value": 16, "unit": "px"}',
                )
            ]

        if DIMENSION_PATTERN.match(value):
            return []

        if LOOSE_DIMENSION_PATTERN.match(value):
            return [self._warning(3, path, f"Unusual {self.label} format", UNITS_HINT)]

        return [
            self._error(
                2,
                path,
                f"Invalid {self.label} format",
                'Use a number followed by a unit, e.g. "16px"',
            )
        ]

    def _check_object(self, value: dict, path: str) -> list[Diagnostic]:
        if "value" not in value or "unit" not in value:
            return [
                self._error(
                    4,
                    path,
                    f"Invalid {self.label} object",
                    'Dimension objects must have "value" and "unit"',
                    actual_structure=value,
                    correct_example={"value": 16, "unit": "px"},
                )
            ]

        issues = []
        if not is_number(value["value"]):
            issues.append(self._error(5, f"{path}.value", f"{self.label} object value must be a number"))
        if value["unit"] not in DIMENSION_UNITS:
            issues.append(self._warning(6, f"{path}.unit", f"Unusual {self.label} unit", UNITS_HINT))
        return issues


class LineHeightValidator(DimensionValidator):
    """Line heights may also be unitless multipliers."""

    allow_numbers = True

    def __init__(self):
        super().__init__(label="lineHeight")


class FontWeightValidator(DimensionValidator):
    """Font weights: 1-1000, a named weight, or a dimension-shaped value."""

    RULE_PREFIX = "FONT_WEIGHT"

    def __init__(self):
        super().__init__(label="fontWeight")

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if is_number(value):
            if 1 <= value <= 1000:
                return []
            return [self._error(7, path, "Font weight out of range", "Numeric weights run from 1 to 1000")]

        if isinstance(value, str):
            text = value.strip().lower()
            if text in FONT_WEIGHT_NAMES:
                return []
            if NUMBER_PATTERN.match(text):
                return self._check(float(text), path)

        return super()._check(value, path)
