"""Color value rules."""

from typing import Any

from ..classifier import is_number, is_object
from ..constants import HEX_COLOR_PATTERN
from ..models import Diagnostic
from .base import ValueValidator


class ColorValidator(ValueValidator):
    """Validates color strings and structured color objects."""

    RULE_PREFIX = "COLOR"

    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        if is_object(value):
            return self._check_object(value, path)

        if not isinstance(value, str):
            return [
                self._error(
                    1,
                    path,
                    "Color value must be a string",
                    "Use hex (#E00069), rgb(), or a color object with colorSpace and channels",
                )
            ]

        if value.startswith("#") and not HEX_COLOR_PATTERN.match(value):
            return [
                self._error(
                    2,
                    path,
                    "Invalid hex color format",
                    "Use valid hex: #RGB, #RRGGBB, or #RRGGBBAA",
                )
            ]

        return []

    def _check_object(self, value: dict, path: str) -> list[Diagnostic]:
        channels = value.get("channels", value.get("components"))
        if not value.get("colorSpace") or channels is None:
            return [
                self._error(
                    3,
                    path,
                    "Invalid color object",
                    'Color objects must have "colorSpace" and "channels"',
                    actual_structure=value,
                    correct_example={"colorSpace": "srgb", "channels": [0.878, 0, 0.412]},
                )
            ]

        if not isinstance(channels, list) or not all(is_number(c) for c in channels):
            return [
                self._error(
                    4,
                    f"{path}.channels",
                    "Color channels must be a list of numbers",
                    "Use values between 0 and 1, e.g. [0.878, 0, 0.412]",
                )
            ]

        return []
