"""Abstract base class for token value validators."""

from abc import ABC, abstractmethod
from typing import Any

from ..classifier import is_alias
from ..models import Diagnostic, Severity


class ValueValidator(ABC):
    """Base class for per-type value validators.

    Validators are pure: they never touch the document and report every
    problem as a Diagnostic in the returned list. References such as
    "{color.primary}" are not resolved, so their values are never checked.
    """

    RULE_PREFIX = "VALUE"

    def validate(self, value: Any, path: str) -> list[Diagnostic]:
        """Validate a token value.

        Args:
            value: The token's $value (or legacy value)
            path: Path of the value, e.g. "$.colors.primary.$value"

        Returns:
            List of diagnostics found (empty if the value is fine)
        """
        if is_alias(value):
            return []
        return self._check(value, path)

    @abstractmethod
    def _check(self, value: Any, path: str) -> list[Diagnostic]:
        pass

    def _error(self, number: int, path: str, message: str, hint: str | None = None, **extra) -> Diagnostic:
        return self._diagnostic(Severity.ERROR, number, path, message, hint, **extra)

    def _warning(self, number: int, path: str, message: str, hint: str | None = None, **extra) -> Diagnostic:
        return self._diagnostic(Severity.WARNING, number, path, message, hint, **extra)

    def _diagnostic(
        self, severity: Severity, number: int, path: str, message: str, hint: str | None, **extra
    ) -> Diagnostic:
        return Diagnostic(
            path=path,
            message=message,
            severity=severity,
            hint=hint,
            rule_id=f"{self.RULE_PREFIX}_{number:03d}",
            **extra,
        )
