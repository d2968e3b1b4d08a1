"""Rules for single-valued token types."""

from typing import Any

from ..classifier import is_number, is_object
from ..constants import (
    DURATION_PATTERN,
    DURATION_UNITS,
    LINE_CAPS,
    STROKE_STYLES,
    TEXT_CASES,
    TEXT_DECORATIONS,
    VALUE_KEY,
)
from ..models import Diagnostic
from .base import ValueValidator


class NumberValidator(ValueValidator):
    """Validates plain numeric tokens."""

    RULE_PREFIX = "NUMBER"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if is_number(value):
            return []
        return [self._error(1, path, "Number value must be numeric", "Use a JSON number, e.g. 1.5")]


class OpacityValidator(ValueValidator):
    """Validates opacities, numbers between 0 and 1 inclusive."""

    RULE_PREFIX = "OPACITY"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if not is_number(value):
            return [self._error(1, path, "Opacity value must be numeric", "Use a number between 0 and 1")]
        if not 0 <= value <= 1:
            return [self._error(2, path, f"Opacity {value} is out of range", "Use a number between 0 and 1")]
        return []


class FontFamilyValidator(ValueValidator):
    """Validates font family names and fallback stacks."""

    RULE_PREFIX = "FONT_FAMILY"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if isinstance(value, str) and value.strip():
            return []
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            return []
        return [
            self._error(
                1,
                path,
                "Font family must be a string or array of strings",
                'Use a font name or a stack: ["Inter", "sans-serif"]',
            )
        ]


class DurationValidator(ValueValidator):
    """Validates durations: milliseconds, "<n>ms"/"<n>s", or {value, unit}."""

    RULE_PREFIX = "DURATION"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if is_number(value):
            return []

        if isinstance(value, str):
            if DURATION_PATTERN.match(value):
                return []
            return [self._error(1, path, "Invalid duration format", 'Use "200ms", "0.5s" or a number of milliseconds')]

        if is_object(value):
            if is_number(value.get("value")) and value.get("unit") in DURATION_UNITS:
                return []
            return [
                self._error(
                    2,
                    path,
                    "Invalid duration object",
                    'Duration objects need a numeric "value" and a "unit" of ms or s',
                    correct_example={"value": 200, "unit": "ms"},
                )
            ]

        return [self._error(3, path, "Invalid duration value", "Duration must be a number, string or object")]


class CubicBezierValidator(ValueValidator):
    """Validates easing curves given as four control-point numbers."""

    RULE_PREFIX = "CUBIC_BEZIER"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        # A whole token may be handed in, e.g. a transition's timingFunction
        if is_object(value) and VALUE_KEY in value:
            return self.validate(value[VALUE_KEY], f"{path}.{VALUE_KEY}")

        if isinstance(value, list) and len(value) == 4 and all(is_number(v) for v in value):
            return []

        return [
            self._error(
                1,
                path,
                "Cubic bezier must be an array of exactly 4 numbers",
                "Format: [x1, y1, x2, y2], e.g. [0.4, 0, 0.2, 1]",
                actual_structure=value,
            )
        ]


class EnumValidator(ValueValidator):
    """Validates a keyword against a fixed set of allowed values."""

    allowed: frozenset[str] = frozenset()
    label = "value"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if isinstance(value, str) and value in self.allowed:
            return []
        return [
            self._error(
                1,
                path,
                f"Invalid {self.label}: {value!r}",
                f"Valid values: {', '.join(sorted(self.allowed))}",
            )
        ]


class TextCaseValidator(EnumValidator):
    RULE_PREFIX = "TEXT_CASE"
    allowed = TEXT_CASES
    label = "textCase"


class TextDecorationValidator(EnumValidator):
    RULE_PREFIX = "TEXT_DECORATION"
    allowed = TEXT_DECORATIONS
    label = "textDecoration"


class StrokeStyleValidator(EnumValidator):
    """Stroke styles are a keyword or a {dashArray, lineCap} object."""

    RULE_PREFIX = "STROKE_STYLE"
    allowed = STROKE_STYLES
    label = "strokeStyle"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if not is_object(value):
            return super()._check(value, path)

        issues = []
        if not isinstance(value.get("dashArray"), list) or not value["dashArray"]:
            issues.append(
                self._error(2, f"{path}.dashArray", "Stroke style object needs a non-empty dashArray")
            )
        line_cap = value.get("lineCap")
        if not isinstance(line_cap, str) or line_cap not in LINE_CAPS:
            issues.append(
                self._error(
                    3,
                    f"{path}.lineCap",
                    f"Invalid lineCap: {line_cap!r}",
                    f"Valid values: {', '.join(sorted(LINE_CAPS))}",
                )
            )
        return issues
