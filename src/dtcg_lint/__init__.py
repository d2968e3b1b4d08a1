"""Validation and normalization of design-token documents."""

from .constants import TokenType
from .fixer import apply_approved_fixes, find_conflicts, get_fixable_issues
from .inference import infer_type
from .models import Diagnostic, Fix, FixType, NodeKind, Severity, StructureIssue, ValidationResult
from .normalizer import auto_fix, auto_fix_document, convert_to_color_object, parse_dimension
from .structure import analyze_structure, flatten_cluster
from .validator import TokenValidator, validate

__all__ = [
    "Diagnostic",
    "Fix",
    "FixType",
    "NodeKind",
    "Severity",
    "StructureIssue",
    "TokenType",
    "TokenValidator",
    "ValidationResult",
    "analyze_structure",
    "apply_approved_fixes",
    "auto_fix",
    "auto_fix_document",
    "convert_to_color_object",
    "find_conflicts",
    "flatten_cluster",
    "get_fixable_issues",
    "infer_type",
    "parse_dimension",
    "validate",
]
