"""Whole-document rewrite into the structured token format.

auto_fix is the one-click counterpart of the approval-based fixer: it renames
legacy keys, collapses DEFAULT-style wrappers, wraps bare values as tokens,
assigns $type and converts raw values into structured ones. It never mutates
its input.
"""

import copy
from typing import Any

from common.logger import get_logger

from .classifier import child_keys, is_number, is_object, value_key
from .constants import (
    DESCRIPTION_KEY,
    DIMENSION_PATTERN,
    HEX_COLOR_PATTERN,
    LEGACY_DESCRIPTION_KEY,
    LEGACY_TYPE_KEY,
    RGB_PATTERN,
    TYPE_KEY,
    VALUE_KEY,
    WRAPPER_KEYS,
    TokenType,
)
from .inference import infer_type
from .structure import is_token_group

logger = get_logger(__name__)

# Types whose string values are dimension-shaped and may be converted
DIMENSION_TYPES = frozenset(
    {
        TokenType.DIMENSION.value,
        TokenType.FONT_SIZE.value,
        TokenType.LETTER_SPACING.value,
        TokenType.PARAGRAPH_SPACING.value,
        TokenType.BORDER_RADIUS.value,
    }
)


def _round(channel: float) -> float:
    return round(channel, 3)


def convert_to_color_object(hex_color: Any) -> Any:
    """Convert a hex color string into a structured sRGB color.

    Args:
        hex_color: "#RGB", "#RRGGBB" or "#RRGGBBAA"

    Returns:
        {"colorSpace": "srgb", "channels": [r, g, b], "hex": ...} with channels
        in [0, 1] rounded to 3 decimals, plus "alpha" for 8-digit input.
        Anything that is not a valid hex string is returned unchanged.

    Example:
        >>> convert_to_color_object("#E00069")
        {'colorSpace': 'srgb', 'channels': [0.878, 0.0, 0.412], 'hex': '#E00069'}
    """
    if not isinstance(hex_color, str) or not HEX_COLOR_PATTERN.match(hex_color):
        return hex_color

    digits = hex_color[1:]
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    color: dict[str, Any] = {
        "colorSpace": "srgb",
        "channels": [_round(r), _round(g), _round(b)],
        "hex": f"#{digits[:6].upper()}",
    }
    if len(digits) == 8:
        color["alpha"] = _round(int(digits[6:8], 16) / 255)
    return color


def parse_color_string(color: Any) -> Any:
    """Convert "rgb(r, g, b)" / "rgba(r, g, b, a)" into a structured color.

    Unparseable input is returned unchanged.
    """
    match = RGB_PATTERN.match(color.strip()) if isinstance(color, str) else None
    if not match:
        return color

    channels = [int(match.group(i)) for i in (1, 2, 3)]
    if any(c > 255 for c in channels):
        return color

    result: dict[str, Any] = {
        "colorSpace": "srgb",
        "channels": [_round(c / 255) for c in channels],
        "hex": "#" + "".join(f"{c:02X}" for c in channels),
    }
    if match.group(4) is not None:
        result["alpha"] = float(match.group(4))
    return result


def parse_dimension(dimension: Any) -> Any:
    """Split a dimension string into {"value": number, "unit": str}.

    Example:
        >>> parse_dimension("16px")
        {'value': 16, 'unit': 'px'}
        >>> parse_dimension("1.5rem")
        {'value': 1.5, 'unit': 'rem'}
    """
    match = DIMENSION_PATTERN.match(dimension.strip()) if isinstance(dimension, str) else None
    if not match:
        return dimension

    number = float(match.group(1))
    return {"value": int(number) if number.is_integer() else number, "unit": match.group(2)}


def format_dimension(dimension: Any) -> Any:
    """Inverse of parse_dimension: {"value": 16, "unit": "px"} -> "16px"."""
    if not is_object(dimension) or "value" not in dimension or "unit" not in dimension:
        return dimension
    number = dimension["value"]
    if is_number(number) and float(number).is_integer():
        number = int(number)
    return f"{number}{dimension['unit']}"


def _convert_value(value: Any, token_type: str | None) -> tuple[Any, str | None]:
    """Convert a raw string value when its type allows it."""
    if not isinstance(value, str):
        return value, token_type

    if token_type in (None, TokenType.COLOR.value):
        if value.startswith("#"):
            converted = convert_to_color_object(value)
            return converted, TokenType.COLOR.value
        converted = parse_color_string(value)
        if converted is not value:
            return converted, TokenType.COLOR.value

    if token_type is None or token_type in DIMENSION_TYPES:
        converted = parse_dimension(value)
        if converted is not value:
            return converted, token_type or TokenType.DIMENSION.value

    return value, token_type


def _fix_token(node: dict, parent_type: str | None) -> dict:
    raw = node[value_key(node)]

    token_type = node.get(TYPE_KEY) or node.get(LEGACY_TYPE_KEY) or parent_type
    if not isinstance(token_type, str):
        token_type = None
    if token_type is None:
        inferred = infer_type(raw)
        token_type = inferred.value if inferred else None

    value, token_type = _convert_value(copy.deepcopy(raw), token_type)

    fixed: dict[str, Any] = {VALUE_KEY: value}
    if token_type:
        fixed[TYPE_KEY] = token_type

    description = node.get(DESCRIPTION_KEY) or node.get(LEGACY_DESCRIPTION_KEY)
    if description:
        fixed[DESCRIPTION_KEY] = description

    for key, extra in node.items():
        if key.startswith("$") and key not in (VALUE_KEY, TYPE_KEY, DESCRIPTION_KEY):
            fixed[key] = copy.deepcopy(extra)
    return fixed


def _unwrap(node: dict) -> dict | None:
    """Collapse {"DEFAULT": x} style wrappers; None when node is not one."""
    keys = child_keys(node)
    if len(keys) != 1 or keys[0] not in WRAPPER_KEYS or value_key(node):
        return None

    child = node[keys[0]]
    unwrapped = dict(child) if is_object(child) else {VALUE_KEY: child}
    for key, meta in node.items():
        if key.startswith("$"):
            unwrapped.setdefault(key, meta)
    return unwrapped


def _known_type(node: dict) -> str | None:
    """A group's $type, when it is one the validator recognises."""
    parsed = TokenType.parse(node.get(TYPE_KEY))
    return parsed.value if parsed else None


def auto_fix(node: Any, parent_type: str | None = None) -> Any:
    """Rewrite a token tree into the structured format.

    Args:
        node: Any JSON value (usually a group)
        parent_type: $type inherited from the enclosing group

    Returns:
        A new tree; the input is left untouched
    """
    if isinstance(node, list):
        return [auto_fix(item, parent_type) for item in node]
    if not is_object(node):
        return node

    unwrapped = _unwrap(node)
    if unwrapped is not None:
        return auto_fix(unwrapped, parent_type)

    if value_key(node):
        return _fix_token(node, parent_type)

    group_type = _known_type(node) or parent_type
    fixed: dict[str, Any] = {}
    for key, child in node.items():
        if key.startswith("$"):
            fixed[key] = copy.deepcopy(child)
        elif child is not None and not isinstance(child, (dict, list)):
            fixed[key] = auto_fix({VALUE_KEY: child}, group_type)
        else:
            fixed[key] = auto_fix(child, group_type)
    return fixed


def auto_fix_document(document: Any) -> Any:
    """Apply auto_fix to every token group of a document.

    Root metadata ("$schema", "$description", ...) and the brand block are
    copied as they are. Non-object documents are returned unchanged.
    """
    if not is_object(document):
        return document

    root_type = _known_type(document)
    fixed = {}
    groups = 0
    for key, value in document.items():
        if is_token_group(key, value):
            fixed[key] = auto_fix(value, root_type)
            groups += 1
        else:
            fixed[key] = copy.deepcopy(value)

    logger.debug(f"Normalized {groups} token group(s)")
    return fixed
