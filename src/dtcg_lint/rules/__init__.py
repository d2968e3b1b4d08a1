"""Per-type value validators and the dispatch table that selects them."""

from typing import Any

from ..constants import TokenType
from ..models import Diagnostic
from .base import ValueValidator
from .color_rules import ColorValidator
from .composite_rules import (
    BorderValidator,
    GradientValidator,
    ShadowValidator,
    TransitionValidator,
    TypographyValidator,
)
from .dimension_rules import DimensionValidator, FontWeightValidator, LineHeightValidator
from .scalar_rules import (
    CubicBezierValidator,
    DurationValidator,
    FontFamilyValidator,
    NumberValidator,
    OpacityValidator,
    StrokeStyleValidator,
    TextCaseValidator,
    TextDecorationValidator,
)

VALUE_VALIDATORS: dict[TokenType, ValueValidator] = {
    TokenType.COLOR: ColorValidator(),
    TokenType.DIMENSION: DimensionValidator(),
    TokenType.NUMBER: NumberValidator(),
    TokenType.OPACITY: OpacityValidator(),
    TokenType.FONT_FAMILY: FontFamilyValidator(),
    TokenType.FONT_SIZE: DimensionValidator("fontSize"),
    TokenType.FONT_WEIGHT: FontWeightValidator(),
    TokenType.LINE_HEIGHT: LineHeightValidator(),
    TokenType.LETTER_SPACING: DimensionValidator("letterSpacing"),
    TokenType.PARAGRAPH_SPACING: DimensionValidator("paragraphSpacing"),
    TokenType.DURATION: DurationValidator(),
    TokenType.BORDER_RADIUS: DimensionValidator("borderRadius"),
    TokenType.TEXT_CASE: TextCaseValidator(),
    TokenType.TEXT_DECORATION: TextDecorationValidator(),
    TokenType.TYPOGRAPHY: TypographyValidator(),
    TokenType.SHADOW: ShadowValidator(),
    TokenType.GRADIENT: GradientValidator(),
    TokenType.BORDER: BorderValidator(),
    TokenType.STROKE_STYLE: StrokeStyleValidator(),
    TokenType.TRANSITION: TransitionValidator(),
    TokenType.CUBIC_BEZIER: CubicBezierValidator(),
}

_unhandled = set(TokenType) - set(VALUE_VALIDATORS)
if _unhandled:
    raise RuntimeError(f"No value validator for: {sorted(t.value for t in _unhandled)}")


def validate_value(token_type: TokenType, value: Any, path: str) -> list[Diagnostic]:
    """Run the validator registered for a token type.

    Args:
        token_type: The token's resolved type
        value: The raw token value
        path: Path of the value in the document

    Returns:
        Diagnostics produced by the type's validator
    """
    return VALUE_VALIDATORS[token_type].validate(value, path)


__all__ = [
    "VALUE_VALIDATORS",
    "ValueValidator",
    "validate_value",
]
