"""Collect approvable fixes and apply the approved ones to a document copy."""

import copy
from itertools import combinations
from typing import Any

from common.logger import get_logger

from .classifier import (
    child_keys,
    group_type,
    has_value_key,
    is_object,
    join_path,
    split_path,
    token_value,
)
from .constants import LEGACY_TYPE_KEY, TYPE_KEY, TokenType
from .inference import infer_type
from .models import Fix, FixType
from .structure import analyze_structure, is_token_group

logger = get_logger(__name__)


def get_fixable_issues(document: Any) -> list[Fix]:
    """Collect every fix that can be applied to a document.

    Tokens without a $type (and without a typed ancestor group) get an
    "add-type" fix when their type can be determined; every nested-token
    cluster gets a "flatten" fix. All fixes start unapproved.

    Args:
        document: Parsed token document

    Returns:
        Fixes with ids "fix-0", "fix-1", ... in collection order
    """
    if not is_object(document):
        return []

    fixes: list[Fix] = []
    root_type = group_type(document)

    for group_name, group in document.items():
        if is_token_group(group_name, group):
            _collect_missing_types(group, [group_name], group_type(group) or root_type, fixes)

    for issue in analyze_structure(document):
        if issue.auto_fixable:
            fixes.append(
                Fix(
                    id=f"fix-{len(fixes)}",
                    type=FixType.FLATTEN,
                    path=issue.path,
                    description=issue.description,
                    before=issue.original_structure,
                    after=issue.flattened_structure,
                    keys=list(issue.keys),
                )
            )

    logger.debug(f"Collected {len(fixes)} fixable issue(s)")
    return fixes


def _collect_missing_types(group: dict, keys: list[str], inherited: TokenType | None, fixes: list[Fix]) -> None:
    for name, node in group.items():
        if name.startswith("$") or not is_object(node):
            continue

        node_keys = [*keys, name]

        if has_value_key(node):
            if TYPE_KEY in node or inherited is not None:
                continue
            token_type = TokenType.parse(node.get(LEGACY_TYPE_KEY)) or infer_type(token_value(node))
            if token_type is None:
                continue
            fixes.append(
                Fix(
                    id=f"fix-{len(fixes)}",
                    type=FixType.ADD_TYPE,
                    path=join_path(*node_keys),
                    description=f'Add missing $type: "{token_type.value}"',
                    before=copy.deepcopy(node),
                    after={**copy.deepcopy(node), TYPE_KEY: token_type.value},
                    keys=node_keys,
                )
            )
        elif child_keys(node):
            _collect_missing_types(node, node_keys, group_type(node) or inherited, fixes)


def _overlapping(a: list[str], b: list[str]) -> bool:
    shorter = min(len(a), len(b))
    return a[:shorter] == b[:shorter]


def paths_overlap(first: str, second: str) -> bool:
    """True when one path equals or contains the other."""
    return _overlapping(split_path(first), split_path(second))


def target_keys(fix: Fix) -> list[str]:
    """Key chain a fix targets, falling back to its display path."""
    return fix.keys or split_path(fix.path)


def fixes_overlap(first: Fix, second: Fix) -> bool:
    """True when one fix's target equals or contains the other's."""
    return _overlapping(target_keys(first), target_keys(second))


def find_conflicts(fixes: list[Fix]) -> list[tuple[Fix, Fix]]:
    """Pairs of approved fixes whose targets overlap."""
    approved = [f for f in fixes if f.approved]
    return [(a, b) for a, b in combinations(approved, 2) if fixes_overlap(a, b)]


class TokenFixer:
    """Applies fixes to a private copy of a token document."""

    def __init__(self, document: dict):
        """Initialize the fixer.

        Args:
            document: Document to patch; it is deep-copied and never modified
        """
        self.document = copy.deepcopy(document)
        self.applied: list[Fix] = []

    def apply_fix(self, fix: Fix) -> bool:
        """Apply a single fix.

        Args:
            fix: The fix to apply

        Returns:
            True if the fix was applied, False if it was skipped
        """
        for done in self.applied:
            if fixes_overlap(done, fix):
                logger.warning(f"Skipping {fix.id}: {fix.path} overlaps {done.id} ({done.path})")
                return False

        keys = target_keys(fix)
        parent = self._find_parent(keys)
        if parent is None or keys[-1] not in parent:
            logger.warning(f"Skipping {fix.id}: {fix.path} not found in document")
            return False

        if fix.type == FixType.ADD_TYPE:
            applied = self._add_type(parent, keys[-1], fix)
        else:
            applied = self._flatten(parent, keys[-1], fix)

        if applied:
            self.applied.append(fix)
        return applied

    def get_applied_fixes(self) -> list[Fix]:
        return self.applied

    def _find_parent(self, keys: list[str]) -> dict | None:
        if not keys:
            return None
        current: Any = self.document
        for key in keys[:-1]:
            if not is_object(current) or key not in current:
                return None
            current = current[key]
        return current if is_object(current) else None

    def _add_type(self, parent: dict, name: str, fix: Fix) -> bool:
        token = parent[name]
        # Verify the token still matches what the fix was computed from
        if token != fix.before:
            logger.warning(f"Skipping {fix.id}: {fix.path} doesn't match the expected token")
            return False
        token[TYPE_KEY] = fix.after[TYPE_KEY]
        return True

    def _flatten(self, parent: dict, name: str, fix: Fix) -> bool:
        if parent[name] != fix.before.get(name):
            logger.warning(f"Skipping {fix.id}: {fix.path} doesn't match the expected structure")
            return False

        replacement = copy.deepcopy(fix.after)
        clashes = [k for k in replacement if k != name and k in parent]
        if clashes:
            logger.warning(f"Skipping {fix.id}: flattening would overwrite {', '.join(clashes)}")
            return False

        # Rebuild so the flattened tokens take the nested cluster's position
        entries = list(parent.items())
        parent.clear()
        for key, value in entries:
            if key == name:
                parent.update(replacement)
            elif key not in replacement:
                parent[key] = value
        return True


def apply_approved_fixes(document: Any, fixes: list[Fix]) -> Any:
    """Apply the approved fixes to a deep copy of a document.

    Fixes are applied in list order. A fix whose target overlaps one that
    was already applied, or whose target no longer matches, is skipped.

    Args:
        document: Parsed token document
        fixes: Fixes from get_fixable_issues, with approved set by the caller

    Returns:
        The patched copy
    """
    if not is_object(document):
        return copy.deepcopy(document)

    fixer = TokenFixer(document)
    approved = [f for f in fixes if f.approved]
    for fix in approved:
        fixer.apply_fix(fix)

    logger.debug(f"Applied {len(fixer.get_applied_fixes())} of {len(approved)} approved fix(es)")
    return fixer.document
