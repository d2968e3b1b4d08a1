"""Validation result reporters."""

import json

from rich.markup import escape

from common.env import env
from common.logger import get_logger

from .models import Diagnostic, Severity, ValidationResult

logger = get_logger(__name__)


def get_suggestion(diagnostic: Diagnostic) -> str | None:
    """Short remediation text for the most common diagnostics."""
    message = diagnostic.message
    if "missing" in message.lower() and "$value" in message:
        return "Add a $value property to complete the token definition"
    if "must be an object" in message:
        return "Wrap the content in curly braces: { }"
    if "Invalid hex color" in message:
        return "Check hex color format: #RGB, #RRGGBB or #RRGGBBAA"
    if message.startswith("Missing $type"):
        return "Run `dtcg-lint fix` to add the inferred types"
    if message.startswith("Legacy"):
        return "Run `dtcg-lint autofix` to rename legacy keys"
    return None


class ValidationReporter:
    """Format and display validation results."""

    def __init__(self, show_warnings: bool = True):
        """Initialize the reporter.

        Args:
            show_warnings: Whether to list warning-level diagnostics
        """
        self.show_warnings = show_warnings

    def report_console(self, result: ValidationResult, source: str = "document") -> int:
        """Print a validation result to the console.

        Args:
            result: Validation result to report
            source: Name shown in the heading (usually the file name)

        Returns:
            Exit code (0 for success, 1 if errors found)
        """
        logger.info(f"\n{source}:")

        for diagnostic in [*result.errors, *result.warnings]:
            if diagnostic.severity == Severity.ERROR:
                icon = "[red]✗[/red]"
            elif self.show_warnings:
                icon = "[yellow]⚠[/yellow]"
            else:
                continue

            rule = f" [dim]({diagnostic.rule_id})[/dim]" if diagnostic.rule_id else ""
            logger.info(f"  {icon} [bold]{escape(diagnostic.path)}[/bold]: {escape(diagnostic.message)}{rule}")
            if diagnostic.hint:
                logger.info(f"      Hint: {escape(diagnostic.hint)}")
            suggestion = get_suggestion(diagnostic)
            if suggestion:
                logger.info(f"      Suggestion: {escape(suggestion)}")

        for issue in result.structure_issues:
            logger.info(f"  [cyan]↳[/cyan] [bold]{escape(issue.path)}[/bold]: {escape(issue.message)}")
            logger.info(f"      {escape(issue.suggestion)}")

        logger.info("\n" + "=" * 60)
        logger.info(
            f"Total: [bold]{len(result.errors)}[/bold] errors, "
            f"[bold]{len(result.warnings)}[/bold] warnings, "
            f"[bold]{len(result.structure_issues)}[/bold] structure issues"
        )

        if not result.valid:
            return 1
        return 0

    def report_json(self, result: ValidationResult, indent: int | None = None) -> str:
        """Format a result as JSON.

        Args:
            result: Validation result to report
            indent: JSON indentation (defaults to DTCG_JSON_INDENT)

        Returns:
            JSON string representation of the result
        """
        data = result.to_dict()
        if not self.show_warnings:
            data["warnings"] = []
        return json.dumps(data, indent=env.json_indent() if indent is None else indent)
