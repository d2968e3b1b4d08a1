"""Guess a token's type from its raw value."""

from typing import Any

from .classifier import is_number
from .constants import (
    COLOR_FUNCTION_PATTERN,
    DIMENSION_PATTERN,
    DURATION_PATTERN,
    NUMBER_PATTERN,
    TokenType,
)


def _numeric_type(number: float) -> TokenType:
    return TokenType.OPACITY if 0 <= number <= 1 else TokenType.NUMBER


def infer_type(value: Any) -> TokenType | None:
    """Infer a token type from a raw value.

    Args:
        value: The token's $value (or legacy value)

    Returns:
        The inferred type, or None when no heuristic matches

    Example:
        >>> infer_type("#E00069")
        <TokenType.COLOR: 'color'>
        >>> infer_type("200ms")
        <TokenType.DURATION: 'duration'>
        >>> infer_type(0.5)
        <TokenType.OPACITY: 'opacity'>
    """
    if is_number(value):
        return _numeric_type(value)

    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.startswith("#") or COLOR_FUNCTION_PATTERN.match(text):
        return TokenType.COLOR
    if DIMENSION_PATTERN.match(text):
        return TokenType.DIMENSION
    if DURATION_PATTERN.match(text):
        return TokenType.DURATION
    if NUMBER_PATTERN.match(text):
        return _numeric_type(float(text))
    return None
