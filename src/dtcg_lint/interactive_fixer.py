"""Interactive fix approval."""

import json
from pathlib import Path
from typing import Any

from rich.markup import escape

from common.logger import get_logger, warning

from .documents import load_document, write_document
from .fixer import apply_approved_fixes, fixes_overlap, get_fixable_issues
from .models import Fix

logger = get_logger(__name__)


class InteractiveFixer:
    """Walk through the fixable issues of a document and apply the approved ones."""

    def __init__(self, document_path: Path, output_path: Path | None = None):
        """Initialize the interactive fixer.

        Args:
            document_path: Token document to fix
            output_path: Where to write the result (default: overwrite the input)
        """
        self.document_path = document_path
        self.output_path = output_path or document_path
        self.document: Any = load_document(document_path)
        self.fixes: list[Fix] = get_fixable_issues(self.document)

    def run(self, auto_yes: bool = False, dry_run: bool = False) -> dict:
        """Run the interactive fixer.

        Args:
            auto_yes: If True, approve every fix without prompting
            dry_run: If True, don't write the fixed document

        Returns:
            Dictionary with statistics about fixes approved
        """
        if not self.fixes:
            logger.info("No fixable issues found.")
            return {"total": 0, "approved": 0, "skipped": 0, "conflicts": 0}

        logger.info(f"\nFound [bold]{len(self.fixes)}[/bold] fixable issues.\n")

        stats = {"total": len(self.fixes), "approved": 0, "skipped": 0, "conflicts": 0}

        for i, fix in enumerate(self.fixes, 1):
            logger.info(f"[[bold]{i}[/bold]/[bold]{stats['total']}[/bold]] {escape(fix.path)}")
            logger.info(f"  Fix: {fix.type.value}")
            logger.info(f"  {escape(fix.description)}")
            logger.info(f"  Before: {escape(json.dumps(fix.before))}")
            logger.info(f"  After: {escape(json.dumps(fix.after))}")

            conflict = next(
                (f for f in self.fixes if f.approved and fixes_overlap(f, fix)),
                None,
            )
            if conflict is not None:
                logger.info(f"[yellow]⚠[/yellow] Overlaps approved {conflict.id}, skipping")
                stats["conflicts"] += 1
                logger.info("")
                continue

            if auto_yes:
                choice = "y"
            else:
                choice = input("\nApprove this fix? [y/n/q (quit)] ").strip().lower()

            if choice == "q":
                logger.info("\nQuitting...")
                break
            elif choice == "y":
                fix.approved = True
                logger.info("[green]✓[/green] Approved")
                stats["approved"] += 1
            else:
                logger.info("Skipped")
                stats["skipped"] += 1

            logger.info("")  # Blank line between fixes

        logger.info("\n" + "=" * 60)
        logger.info("Fix Summary:")
        logger.info(f"  Total fixable issues: [bold]{stats['total']}[/bold]")
        logger.info(f"  Approved: [green][bold]{stats['approved']}[/bold][/green]")
        logger.info(f"  Skipped: [bold]{stats['skipped']}[/bold]")
        logger.info(f"  Conflicting: [bold]{stats['conflicts']}[/bold]")

        if stats["approved"] and not dry_run:
            fixed = apply_approved_fixes(self.document, self.fixes)
            write_document(fixed, self.output_path)
            logger.info(f"\nWrote fixed document to [bold]{self.output_path}[/bold]")
        elif stats["approved"]:
            warning("Dry run: no changes written")

        return stats
