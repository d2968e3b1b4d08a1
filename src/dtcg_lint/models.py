"""Data models for validation results and fixes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity levels for diagnostics."""

    ERROR = "error"  # Format violation, makes the document invalid
    WARNING = "warning"  # Stylistic or legacy usage


class NodeKind(Enum):
    """How the classifier sees an object node."""

    TOKEN = "token"
    GROUP = "group"
    NESTED_TOKENS = "nested_tokens"  # Group-shaped node whose children are tokens


class FixType(Enum):
    """Kinds of patch a Fix can carry."""

    ADD_TYPE = "add-type"
    FLATTEN = "flatten"


@dataclass
class Diagnostic:
    """A single error or warning found in a token document."""

    path: str  # e.g. "$.colors.primary.$value"
    message: str
    severity: Severity
    hint: str | None = None
    suggested_fix: Any = None
    actual_structure: Any = None
    correct_example: Any = None
    rule_id: str | None = None  # e.g. "COLOR_001"

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "path": self.path,
            "message": self.message,
            "severity": self.severity.value,
        }
        optional = {
            "hint": self.hint,
            "suggestedFix": self.suggested_fix,
            "actualStructure": self.actual_structure,
            "correctExample": self.correct_example,
            "ruleId": self.rule_id,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass
class StructureIssue:
    """A nested-token cluster and the flattened structure that replaces it."""

    path: str
    message: str
    description: str
    suggestion: str
    original_structure: dict
    flattened_structure: dict
    nested_tokens: list[str]
    issue: str = "NESTED_TOKENS"
    fix_type: str = "flatten"
    auto_fixable: bool = True
    keys: list[str] = field(default_factory=list)  # Key chain below the root

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "issue": self.issue,
            "message": self.message,
            "description": self.description,
            "suggestion": self.suggestion,
            "originalStructure": self.original_structure,
            "flattenedStructure": self.flattened_structure,
            "nestedTokens": list(self.nested_tokens),
            "fixType": self.fix_type,
            "autoFixable": self.auto_fixable,
        }


@dataclass
class Fix:
    """An addressable patch that the caller approves before it is applied.

    Attributes:
        id: Stable identifier within one collection pass ("fix-0", "fix-1", ...)
        type: What the patch does
        path: Dot-path of the token or nested cluster the patch targets
        description: Human-readable summary
        before: Target structure before the patch
        after: Target structure after the patch
        approved: Set by the caller; only approved fixes are applied
        keys: Key chain of the target below the root; path is for display
    """

    id: str
    type: FixType
    path: str
    description: str
    before: Any
    after: Any
    approved: bool = False
    keys: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "path": self.path,
            "description": self.description,
            "before": self.before,
            "after": self.after,
            "approved": self.approved,
            "keys": list(self.keys),
        }


@dataclass
class ValidationResult:
    """Result of validating one token document."""

    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    structure_issues: list[StructureIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """A document is valid when no errors were found."""
        return len(self.errors) == 0

    @property
    def is_clean(self) -> bool:
        """Check if result has no diagnostics of any kind."""
        return not (self.errors or self.warnings or self.structure_issues)

    def add(self, diagnostics: list[Diagnostic]) -> None:
        """Sort diagnostics into errors and warnings."""
        for diagnostic in diagnostics:
            if diagnostic.is_error:
                self.errors.append(diagnostic)
            else:
                self.warnings.append(diagnostic)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": [d.to_dict() for d in self.errors],
            "warnings": [d.to_dict() for d in self.warnings],
            "structureIssues": [s.to_dict() for s in self.structure_issues],
        }
