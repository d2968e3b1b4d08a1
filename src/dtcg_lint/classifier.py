"""Token/group classification and the small helpers every walker shares."""

from typing import Any

from .constants import (
    ALIAS_PATTERN,
    LEGACY_TYPE_KEY,
    LEGACY_VALUE_KEY,
    TYPE_KEY,
    VALUE_KEY,
    TokenType,
)
from .models import NodeKind

ROOT = "$"


def is_object(node: Any) -> bool:
    return isinstance(node, dict)


def is_number(value: Any) -> bool:
    """JSON numbers only; bools are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_alias(value: Any) -> bool:
    """Check for a reference such as "{color.primary}"."""
    return isinstance(value, str) and bool(ALIAS_PATTERN.match(value))


def child_keys(node: dict) -> list[str]:
    """Non-metadata keys of an object node, in document order."""
    return [k for k in node if not k.startswith("$")]


def value_key(node: dict) -> str | None:
    """Return the key holding the token value, preferring "$value"."""
    if VALUE_KEY in node:
        return VALUE_KEY
    if LEGACY_VALUE_KEY in node:
        return LEGACY_VALUE_KEY
    return None


def has_value_key(node: Any) -> bool:
    return is_object(node) and value_key(node) is not None


def token_value(node: dict) -> Any:
    key = value_key(node)
    return node[key] if key else None


def declared_type(node: dict) -> TokenType | None:
    """The token's own type tag: "$type", else a recognised legacy "type"."""
    if TYPE_KEY in node:
        return TokenType.parse(node[TYPE_KEY])
    return TokenType.parse(node.get(LEGACY_TYPE_KEY))


def looks_like_token(node: Any) -> bool:
    """A child that carries a value or a $type reads as a token."""
    return is_object(node) and (has_value_key(node) or TYPE_KEY in node)


def is_token(node: dict) -> bool:
    """Tokens carry a value key, or have no children at all.

    Empty objects count as tokens so that the missing value is reported
    instead of silently skipping an empty group.
    """
    return has_value_key(node) or not child_keys(node)


def classify(node: dict) -> NodeKind:
    """Decide whether an object node is a token, a group, or a nested cluster."""
    if is_token(node):
        return NodeKind.TOKEN
    if any(looks_like_token(node[k]) for k in child_keys(node)):
        return NodeKind.NESTED_TOKENS
    return NodeKind.GROUP


def join_path(*parts: str) -> str:
    """Build a "$"-rooted path from a key chain."""
    return ".".join((ROOT, *[p for p in parts if p]))


def split_path(path: str) -> list[str]:
    """Inverse of join_path: the key chain below the root."""
    parts = path.split(".")
    if parts and parts[0] == ROOT:
        parts = parts[1:]
    return parts


def group_type(node: dict) -> TokenType | None:
    """Default type a group hands down to its tokens."""
    return TokenType.parse(node.get(TYPE_KEY))
