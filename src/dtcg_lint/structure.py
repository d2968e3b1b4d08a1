"""Nested-token detection and flattening.

A group whose children are themselves tokens ("brand" holding "hover" and
"active" tokens) is reported as a NESTED_TOKENS structure issue together with
a flat replacement that uses hyphenated names ("brand-hover", "brand-active").
"""

import copy
from typing import Any

from common.logger import get_logger

from .classifier import (
    child_keys,
    classify,
    declared_type,
    group_type,
    has_value_key,
    is_object,
    join_path,
    looks_like_token,
    token_value,
)
from .constants import BRAND_KEY, DEFAULT_CHILD_KEYS, TYPE_KEY, VALUE_KEY
from .inference import infer_type
from .models import NodeKind, StructureIssue

logger = get_logger(__name__)


def is_token_group(key: str, value: Any) -> bool:
    """Root entries that hold tokens: everything but "$" keys and brand metadata."""
    return not key.startswith("$") and key != BRAND_KEY and is_object(value)


def analyze_structure(document: dict) -> list[StructureIssue]:
    """Find nested-token clusters in every top-level group.

    Args:
        document: Parsed token document (root object)

    Returns:
        One StructureIssue per nested cluster, in document order
    """
    issues: list[StructureIssue] = []
    for group_name, group in document.items():
        if is_token_group(group_name, group):
            _analyze_group(group_name, group, [], issues)

    logger.debug(f"Structure analysis found {len(issues)} nested cluster(s)")
    return issues


def _analyze_group(group_name: str, group: dict, keys: list[str], issues: list[StructureIssue]) -> None:
    for name, node in group.items():
        if name.startswith("$") or not is_object(node):
            continue

        node_keys = [*keys, name]
        kind = classify(node)

        if kind == NodeKind.NESTED_TOKENS:
            issues.append(_nested_tokens_issue(group_name, node_keys, node, group))
        elif kind == NodeKind.GROUP:
            _analyze_group(group_name, node, node_keys, issues)


def _nested_tokens_issue(group_name: str, token_keys: list[str], node: dict, parent: dict) -> StructureIssue:
    name = token_keys[-1]
    token_path = ".".join(token_keys)
    nested_keys = child_keys(node)
    flattened = flatten_cluster(name, node)

    description = (
        f"This contains {len(nested_keys)} sub-token(s). "
        "Design token documents should use a flat structure with naming conventions."
    )
    # Flat names already used by siblings would be overwritten
    clashes = [key for key in flattened if key != name and key in parent]
    if clashes:
        description += f" Flattening would overwrite existing key(s): {', '.join(clashes)}."

    return StructureIssue(
        path=join_path(group_name, *token_keys),
        message=f'Nested token structure: "{token_path}"',
        description=description,
        suggestion=f'Flatten to use hyphenated names like "{name}-{nested_keys[0]}"',
        original_structure={name: copy.deepcopy(node)},
        flattened_structure=flattened,
        nested_tokens=nested_keys,
        auto_fixable=not clashes,
        keys=[group_name, *token_keys],
    )


def _resolved_type(token: dict, inherited: str | None) -> str | None:
    explicit = declared_type(token)
    if explicit:
        return explicit.value
    if inherited:
        return inherited
    if has_value_key(token):
        inferred = infer_type(token_value(token))
        return inferred.value if inferred else None
    return None


def _flat_key(taken: dict, prefix: str, key: str) -> str:
    """Hyphenated name for a child, never reusing a name already taken."""
    flat_key = prefix if key in DEFAULT_CHILD_KEYS else f"{prefix}-{key}"
    if flat_key in taken and key in DEFAULT_CHILD_KEYS:
        flat_key = f"{prefix}-{key}"

    candidate, suffix = flat_key, 2
    while candidate in taken:
        candidate = f"{flat_key}-{suffix}"
        suffix += 1
    if candidate != flat_key:
        logger.debug(f'Flattened name "{flat_key}" already used, renamed to "{candidate}"')
    return candidate


def flatten_cluster(name: str, node: dict) -> dict:
    """Build the flat replacement for a nested cluster.

    Child keys are hyphen-joined onto the cluster name, recursing through
    plain subgroups. "DEFAULT", "default" and "base" children take the bare
    prefix. Values are copied unchanged; a missing $type is filled from the
    nearest typed ancestor or inferred from the value. When two children
    map to the same name the later one keeps its raw key, or failing that
    gets a numeric suffix, so every leaf survives.

    Example:
        >>> flatten_cluster("primary", {"hover": {"value": "#111"}})
        {'primary-hover': {'value': '#111', '$type': 'color'}}
        >>> list(flatten_cluster("brand", {"DEFAULT": {"$value": "#111"}, "base": {"$value": "#222"}}))
        ['brand', 'brand-base']
    """
    flattened: dict = {}

    def walk(obj: dict, prefix: str, inherited: str | None) -> None:
        for key, child in obj.items():
            if key.startswith("$"):
                continue

            if not is_object(child):
                inferred = infer_type(child)
                token = {VALUE_KEY: copy.deepcopy(child)}
                if inherited or inferred:
                    token[TYPE_KEY] = inherited or inferred.value
                flattened[_flat_key(flattened, prefix, key)] = token
            elif looks_like_token(child) or not child_keys(child):
                token = copy.deepcopy(child)
                if TYPE_KEY not in token:
                    token_type = _resolved_type(child, inherited)
                    if token_type:
                        token[TYPE_KEY] = token_type
                flattened[_flat_key(flattened, prefix, key)] = token
            else:
                sub_prefix = prefix if key in DEFAULT_CHILD_KEYS else f"{prefix}-{key}"
                walk(child, sub_prefix, _type_name(child) or inherited)

    walk(node, name, _type_name(node))
    return flattened


def _type_name(node: dict) -> str | None:
    parsed = group_type(node)
    return parsed.value if parsed else None
