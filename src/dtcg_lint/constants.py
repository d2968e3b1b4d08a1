"""Fixed vocabulary of the design-token document format."""

import re
from enum import Enum


class TokenType(Enum):
    """Token types understood by the validator."""

    COLOR = "color"
    DIMENSION = "dimension"
    NUMBER = "number"
    OPACITY = "opacity"
    FONT_FAMILY = "fontFamily"
    FONT_SIZE = "fontSize"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    PARAGRAPH_SPACING = "paragraphSpacing"
    DURATION = "duration"
    BORDER_RADIUS = "borderRadius"
    TEXT_CASE = "textCase"
    TEXT_DECORATION = "textDecoration"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    GRADIENT = "gradient"
    BORDER = "border"
    STROKE_STYLE = "strokeStyle"
    TRANSITION = "transition"
    CUBIC_BEZIER = "cubicBezier"

    @classmethod
    def parse(cls, raw) -> "TokenType | None":
        """Look up a type tag, returning None for anything outside the vocabulary."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


VALID_TOKEN_TYPES: tuple[str, ...] = tuple(t.value for t in TokenType)

# Root keys with a meaning of their own; never token groups
RESERVED_ROOT_KEYS: frozenset[str] = frozenset(
    {"$schema", "$id", "$description", "$extensions", "$type"}
)
BRAND_KEY = "brand"
BRAND_REQUIRED_FIELDS: tuple[str, ...] = ("name",)

VALUE_KEY = "$value"
LEGACY_VALUE_KEY = "value"
TYPE_KEY = "$type"
LEGACY_TYPE_KEY = "type"
DESCRIPTION_KEY = "$description"
LEGACY_DESCRIPTION_KEY = "description"

# Single-child wrappers that auto_fix collapses into their parent
WRAPPER_KEYS: frozenset[str] = frozenset({"DEFAULT", "default", "base", "value"})
# Children that take the parent's name when a nested cluster is flattened
DEFAULT_CHILD_KEYS: frozenset[str] = frozenset({"DEFAULT", "default", "base"})

DIMENSION_UNITS: tuple[str, ...] = (
    "px", "rem", "em", "%", "vh", "vw", "vmin", "vmax",
    "pt", "cm", "mm", "in", "pc", "ch",
)
DURATION_UNITS: tuple[str, ...] = ("ms", "s")

TEXT_CASES: frozenset[str] = frozenset({"none", "uppercase", "lowercase", "capitalize"})
TEXT_DECORATIONS: frozenset[str] = frozenset({"none", "underline", "line-through", "overline"})
STROKE_STYLES: frozenset[str] = frozenset(
    {"solid", "dashed", "dotted", "double", "groove", "ridge", "outset", "inset"}
)
LINE_CAPS: frozenset[str] = frozenset({"round", "butt", "square"})
FONT_WEIGHT_NAMES: frozenset[str] = frozenset(
    {
        "thin", "hairline",
        "extra-light", "ultra-light",
        "light",
        "normal", "regular", "book",
        "medium",
        "semi-bold", "demi-bold",
        "bold",
        "extra-bold", "ultra-bold",
        "black", "heavy",
        "extra-black", "ultra-black",
    }
)

_UNIT_ALTERNATION = "|".join(re.escape(u) for u in DIMENSION_UNITS)
NUMBER_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")
DIMENSION_PATTERN = re.compile(rf"^(-?\d+(?:\.\d+)?)({_UNIT_ALTERNATION})$")
# Loose form: something numeric followed by any unit-like suffix
LOOSE_DIMENSION_PATTERN = re.compile(r"^\s*(-?\d*\.?\d+)\s*([a-zA-Z%]*)\s*$")
DURATION_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)(ms|s)$")
HEX_COLOR_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
COLOR_FUNCTION_PATTERN = re.compile(r"^(rgba?|hsla?)\(", re.IGNORECASE)
RGB_PATTERN = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+)\s*)?\)$",
    re.IGNORECASE,
)
ALIAS_PATTERN = re.compile(r"^\{[^{}]+\}$")
