#!/usr/bin/env python3
"""CLI interface for dtcg_lint."""

import argparse
import io
import sys
from pathlib import Path

from common.constants import DEFAULT_DOCUMENT, DOCUMENT_ENCODING
from common.logger import error, progress, success

from .documents import DocumentLoadError, dump_document, load_document, write_document
from .interactive_fixer import InteractiveFixer
from .normalizer import auto_fix_document
from .reporters import ValidationReporter
from .validator import TokenValidator


def cmd_validate(args):
    """Validate a token document.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    document_path = Path(args.file)

    try:
        document = load_document(document_path)
    except DocumentLoadError as e:
        error(str(e))
        return 1

    result = TokenValidator().validate(document)
    reporter = ValidationReporter(show_warnings=not args.errors_only)

    if args.format == "json":
        output = reporter.report_json(result)
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(output, encoding=DOCUMENT_ENCODING)
            print(f"Validation results written to {output_path}")
        else:
            print(output)
        return 0 if result.valid else 1

    if not args.output:
        return reporter.report_console(result, source=document_path.name)

    # Capture console output to file as well
    output_path = Path(args.output)
    old_stdout = sys.stdout
    sys.stdout = buffer = io.StringIO()
    try:
        exit_code = reporter.report_console(result, source=document_path.name)
        output = buffer.getvalue()
        output_path.write_text(output, encoding=DOCUMENT_ENCODING)

        sys.stdout = old_stdout
        print(output, end="")
        print(f"\nValidation results also written to {output_path}")
        return exit_code
    finally:
        sys.stdout = old_stdout


def cmd_fix(args):
    """Interactively approve and apply fixes.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    document_path = Path(args.file)

    try:
        fixer = InteractiveFixer(document_path, output_path=Path(args.output) if args.output else None)
    except DocumentLoadError as e:
        error(str(e))
        return 1

    progress(f"Reviewing fixes for [bold]{document_path}[/bold]...")
    fixer.run(auto_yes=args.yes, dry_run=args.dry_run)
    return 0


def cmd_autofix(args):
    """Rewrite a token document into the structured format.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    document_path = Path(args.file)

    try:
        document = load_document(document_path)
    except DocumentLoadError as e:
        error(str(e))
        return 1

    fixed = auto_fix_document(document)

    if args.output:
        output_path = Path(args.output)
        write_document(fixed, output_path)
        success(f"Fixed document written to {output_path}")
    else:
        print(dump_document(fixed), end="")
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Validate and normalize design token documents")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a token document")
    validate_parser.add_argument("file", nargs="?", default=DEFAULT_DOCUMENT, help="Token document (JSON)")
    validate_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    validate_parser.add_argument(
        "--output",
        type=str,
        help="Write validation results to file (in addition to console for console format)",
    )
    validate_parser.add_argument(
        "--errors-only",
        action="store_true",
        help="Hide warning-level diagnostics",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Fix command
    fix_parser = subparsers.add_parser("fix", help="Interactively approve and apply fixes")
    fix_parser.add_argument("file", nargs="?", default=DEFAULT_DOCUMENT, help="Token document (JSON)")
    fix_parser.add_argument("--output", type=str, help="Write the fixed document here (default: overwrite)")
    fix_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Approve all fixes without prompting",
    )
    fix_parser.add_argument("--dry-run", action="store_true", help="Don't write any changes")
    fix_parser.set_defaults(func=cmd_fix)

    # Autofix command
    autofix_parser = subparsers.add_parser("autofix", help="Normalize a document in one pass")
    autofix_parser.add_argument("file", nargs="?", default=DEFAULT_DOCUMENT, help="Token document (JSON)")
    autofix_parser.add_argument("--output", type=str, help="Write the result here (default: stdout)")
    autofix_parser.set_defaults(func=cmd_autofix)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    exit(main())
