"""Rules for composite token types built from other values."""

from typing import Any

from ..classifier import is_alias, is_number, is_object
from ..constants import TYPE_KEY, TokenType
from ..models import Diagnostic
from .base import ValueValidator
from .color_rules import ColorValidator
from .dimension_rules import DimensionValidator
from .scalar_rules import TextCaseValidator, TextDecorationValidator


class CompositeValidator(ValueValidator):
    """Shared handling for object-valued composite types."""

    label = "composite"
    required: tuple[str, ...] = ()
    example: dict = {}

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if not is_object(value):
            return [
                self._error(
                    1,
                    path,
                    f"{self.label} value must be an object",
                    f"Required properties: {', '.join(self.required)}",
                    correct_example=self.example or None,
                )
            ]

        missing = [name for name in self.required if name not in value]
        if missing:
            return [
                self._error(
                    2,
                    path,
                    f"{self.label} value missing required properties: {', '.join(missing)}",
                    f"Required properties: {', '.join(self.required)}",
                    actual_structure=value,
                    correct_example=self.example or None,
                )
            ]

        return self._check_fields(value, path)

    def _check_fields(self, value: dict, path: str) -> list[Diagnostic]:
        return []


class TypographyValidator(CompositeValidator):
    """Validates typography objects and their optional sub-values."""

    RULE_PREFIX = "TYPOGRAPHY"
    label = "Typography"
    required = ("fontFamily", "fontSize", "fontWeight", "lineHeight")
    example = {"fontFamily": "Inter", "fontSize": "16px", "fontWeight": 400, "lineHeight": 1.5}

    def __init__(self):
        self.optional_fields = {
            "letterSpacing": DimensionValidator("letterSpacing"),
            "paragraphSpacing": DimensionValidator("paragraphSpacing"),
            "textCase": TextCaseValidator(),
            "textDecoration": TextDecorationValidator(),
        }

    def _check_fields(self, value: dict, path: str) -> list[Diagnostic]:
        issues = []
        for name, validator in self.optional_fields.items():
            if name in value:
                issues.extend(validator.validate(value[name], f"{path}.{name}"))
        return issues


class ShadowValidator(CompositeValidator):
    """Validates a shadow or a list of layered shadows."""

    RULE_PREFIX = "SHADOW"
    label = "Shadow"
    required = ("color", "offsetX", "offsetY", "blur")
    example = {"color": "#00000080", "offsetX": "0px", "offsetY": "2px", "blur": "4px"}

    def __init__(self):
        self.color_validator = ColorValidator()

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if not isinstance(value, list):
            return super()._check(value, path)

        issues = []
        for index, layer in enumerate(value):
            issues.extend(self.validate(layer, f"{path}[{index}]"))
        return issues

    def _check_fields(self, value: dict, path: str) -> list[Diagnostic]:
        return self.color_validator.validate(value["color"], f"{path}.color")


class GradientValidator(CompositeValidator):
    """Validates gradients: a non-empty list of color stops."""

    RULE_PREFIX = "GRADIENT"
    label = "Gradient"
    required = ("stops",)
    example = {
        "stops": [
            {"color": "#E00069", "position": 0},
            {"color": "#111111", "position": 1},
        ]
    }

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        # A bare list of stops is accepted as shorthand
        if isinstance(value, list):
            return self._check_stops(value, path)
        return super()._check(value, path)

    def _check_fields(self, value: dict, path: str) -> list[Diagnostic]:
        return self._check_stops(value["stops"], f"{path}.stops")

    def _check_stops(self, stops: Any, path: str) -> list[Diagnostic]:
        if not isinstance(stops, list) or not stops:
            return [
                self._error(
                    3,
                    path,
                    "Gradient stops must be a non-empty array",
                    'Each stop looks like {"color": "#E00069", "position": 0}',
                )
            ]

        issues = []
        for index, stop in enumerate(stops):
            stop_path = f"{path}[{index}]"
            if is_alias(stop):
                continue
            if not is_object(stop) or "color" not in stop or "position" not in stop:
                issues.append(
                    self._error(4, stop_path, "Gradient stop needs a color and a position", actual_structure=stop)
                )
            elif not is_alias(stop["position"]) and not is_number(stop["position"]):
                issues.append(self._error(5, f"{stop_path}.position", "Gradient stop position must be a number"))
        return issues


class BorderValidator(CompositeValidator):
    """Validates border objects."""

    RULE_PREFIX = "BORDER"
    label = "Border"
    required = ("color", "width", "style")
    example = {"color": "#111111", "width": "1px", "style": "solid"}


class TransitionValidator(CompositeValidator):
    """Validates transitions; the easing should itself be a cubic bezier."""

    RULE_PREFIX = "TRANSITION"
    label = "Transition"
    required = ("duration",)
    example = {"duration": "200ms", "delay": "0ms", "timingFunction": [0.5, 0, 1, 1]}

    def _check_fields(self, value: dict, path: str) -> list[Diagnostic]:
        if "timingFunction" not in value or self._is_cubic_bezier(value["timingFunction"]):
            return []
        return [
            self._warning(
                3,
                f"{path}.timingFunction",
                "timingFunction is not a cubicBezier",
                "Use [x1, y1, x2, y2] or reference a cubicBezier token",
            )
        ]

    @staticmethod
    def _is_cubic_bezier(timing: Any) -> bool:
        if is_alias(timing):
            return True
        if is_object(timing):
            return timing.get(TYPE_KEY) == TokenType.CUBIC_BEZIER.value
        return isinstance(timing, list) and len(timing) == 4 and all(is_number(v) for v in timing)
