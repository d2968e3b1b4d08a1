"""Main validator orchestrating structure analysis and per-type rules."""

from typing import Any

from common.env import env
from common.logger import get_logger

from .classifier import (
    group_type,
    is_object,
    is_token,
    join_path,
    token_value,
    value_key,
)
from .constants import (
    BRAND_KEY,
    BRAND_REQUIRED_FIELDS,
    LEGACY_TYPE_KEY,
    LEGACY_VALUE_KEY,
    RESERVED_ROOT_KEYS,
    TYPE_KEY,
    VALID_TOKEN_TYPES,
    VALUE_KEY,
    TokenType,
)
from .inference import infer_type
from .models import Diagnostic, Severity, ValidationResult
from .rules import validate_value
from .structure import analyze_structure

logger = get_logger(__name__)

TOKEN_FORMAT_HINT = 'Format: { "$value": "...", "$type": "color" }'


def _error(rule_id: str, path: str, message: str, hint: str | None = None, **extra) -> Diagnostic:
    return Diagnostic(path=path, message=message, severity=Severity.ERROR, hint=hint, rule_id=rule_id, **extra)


def _warning(rule_id: str, path: str, message: str, hint: str | None = None, **extra) -> Diagnostic:
    return Diagnostic(path=path, message=message, severity=Severity.WARNING, hint=hint, rule_id=rule_id, **extra)


def _example_token(value: Any) -> dict:
    example: dict[str, Any] = {VALUE_KEY: value}
    inferred = infer_type(value)
    if inferred:
        example[TYPE_KEY] = inferred.value
    return example


class TokenValidator:
    """Validates design-token documents.

    The validator keeps only configuration; every call to validate() builds
    and returns a fresh ValidationResult, so one instance can be reused.
    """

    def __init__(self, require_schema: bool | None = None, schema_url: str | None = None):
        """Initialize the validator.

        Args:
            require_schema: Warn when the root has no "$schema"
                (defaults to DTCG_REQUIRE_SCHEMA)
            schema_url: Schema URL suggested in that warning
                (defaults to DTCG_SCHEMA_URL)
        """
        self.require_schema = env.require_schema() if require_schema is None else require_schema
        self.schema_url = schema_url or env.schema_url()

    def validate(self, document: Any) -> ValidationResult:
        """Validate a parsed token document.

        Args:
            document: Parsed JSON value; anything but an object is rejected

        Returns:
            ValidationResult with errors, warnings and structure issues
        """
        result = ValidationResult()

        if not is_object(document):
            result.add(
                [
                    _error(
                        "ROOT_001",
                        "$",
                        "Invalid JSON structure",
                        "The file must be valid JSON and be an object",
                    )
                ]
            )
            return result

        # Structure first, so nested clusters surface before the walk recurses past them
        result.structure_issues.extend(analyze_structure(document))

        result.add(self._validate_root(document))

        if BRAND_KEY in document:
            result.add(self._validate_brand(document[BRAND_KEY]))

        root_type = TokenType.parse(document.get(TYPE_KEY))
        for group_name, group in document.items():
            if group_name.startswith("$") or group_name == BRAND_KEY:
                continue
            result.add(self._validate_group_entry(group_name, group, root_type))

        logger.debug(
            f"Validated document: {len(result.errors)} error(s), {len(result.warnings)} warning(s), "
            f"{len(result.structure_issues)} structure issue(s)"
        )
        return result

    def _validate_root(self, document: dict) -> list[Diagnostic]:
        issues = []

        if "$schema" not in document:
            if self.require_schema:
                issues.append(
                    _warning(
                        "ROOT_002",
                        "$.$schema",
                        "Missing $schema",
                        f'Add "$schema": "{self.schema_url}" so tools know the format',
                    )
                )
        elif not isinstance(document["$schema"], str):
            issues.append(_error("ROOT_003", "$.$schema", "$schema must be a string URL"))

        for key in document:
            if key.startswith("$") and key not in RESERVED_ROOT_KEYS:
                issues.append(
                    _warning(
                        "ROOT_004",
                        join_path(key),
                        f'Unknown reserved key "{key}"',
                        f"Reserved root keys: {', '.join(sorted(RESERVED_ROOT_KEYS))}",
                    )
                )

        if TYPE_KEY in document:
            issues.extend(self._check_type_tag(document[TYPE_KEY], join_path(TYPE_KEY)))

        return issues

    def _validate_brand(self, brand: Any) -> list[Diagnostic]:
        if not is_object(brand):
            return [
                _error(
                    "BRAND_001",
                    "$.brand",
                    "Brand metadata must be an object",
                    "brand should contain brand.name, brand.siteTitle, etc.",
                )
            ]

        return [
            _warning(
                "BRAND_002",
                f"$.brand.{field}",
                f"Missing brand.{field}",
                f"Add brand.{field} to describe your brand",
            )
            for field in BRAND_REQUIRED_FIELDS
            if not brand.get(field)
        ]

    def _validate_group_entry(self, group_name: str, group: Any, root_type: TokenType | None) -> list[Diagnostic]:
        path = join_path(group_name)
        if not is_object(group):
            return [
                _error(
                    "GROUP_001",
                    path,
                    f'Token group "{group_name}" must be an object',
                    f'"{group_name}" should contain token definitions like {{ "primary": {{ "$value": "#E00069" }} }}',
                    actual_structure=group,
                )
            ]

        issues: list[Diagnostic] = []
        if TYPE_KEY in group:
            issues.extend(self._check_type_tag(group[TYPE_KEY], f"{path}.{TYPE_KEY}"))
        issues.extend(self._validate_group(group, [group_name], group_type(group) or root_type))
        return issues

    def _validate_group(self, group: dict, keys: list[str], inherited: TokenType | None) -> list[Diagnostic]:
        issues: list[Diagnostic] = []

        for name, node in group.items():
            if name.startswith("$"):
                continue

            node_keys = [*keys, name]
            path = join_path(*node_keys)

            if not is_object(node):
                issues.append(
                    _error(
                        "TOKEN_001",
                        path,
                        "Token must be an object",
                        TOKEN_FORMAT_HINT,
                        actual_structure=node,
                        correct_example=_example_token(node),
                    )
                )
                continue

            if is_token(node):
                issues.extend(self._validate_token(node, path, inherited))
                continue

            if TYPE_KEY in node:
                issues.extend(self._check_type_tag(node[TYPE_KEY], f"{path}.{TYPE_KEY}"))
            issues.extend(self._validate_group(node, node_keys, group_type(node) or inherited))

        return issues

    def _validate_token(self, token: dict, path: str, inherited: TokenType | None) -> list[Diagnostic]:
        key = value_key(token)
        if key is None:
            return [
                _error(
                    "TOKEN_002",
                    path,
                    'Token missing "$value" property',
                    'Add "$value": "..." to define the token value',
                    actual_structure=token,
                    correct_example={VALUE_KEY: "...", **token},
                )
            ]

        issues: list[Diagnostic] = []
        value = token_value(token)

        if key == LEGACY_VALUE_KEY:
            issues.append(
                _warning(
                    "TOKEN_003",
                    path,
                    "Legacy value key",
                    'Rename "value" to "$value"',
                    suggested_fix={VALUE_KEY: value},
                )
            )

        if TYPE_KEY in token:
            token_type = TokenType.parse(token[TYPE_KEY])
            if token_type is None:
                issues.extend(self._check_type_tag(token[TYPE_KEY], f"{path}.{TYPE_KEY}"))
                return issues
        elif LEGACY_TYPE_KEY in token:
            token_type = TokenType.parse(token[LEGACY_TYPE_KEY])
            issues.append(
                _warning(
                    "TOKEN_004",
                    path,
                    "Legacy type key",
                    'Rename "type" to "$type"',
                    suggested_fix={TYPE_KEY: token[LEGACY_TYPE_KEY]},
                )
            )
            if token_type is None:
                issues.extend(self._check_type_tag(token[LEGACY_TYPE_KEY], f"{path}.{LEGACY_TYPE_KEY}"))
                return issues
        elif inherited is not None:
            token_type = inherited
        else:
            inferred = infer_type(value)
            if inferred is not None:
                issues.append(
                    _warning(
                        "TOKEN_005",
                        path,
                        f'Missing $type - inferred as "{inferred.value}"',
                        f'Add "$type": "{inferred.value}" for format compliance',
                        suggested_fix={TYPE_KEY: inferred.value},
                    )
                )
            return issues

        issues.extend(validate_value(token_type, value, f"{path}.{key}"))
        return issues

    @staticmethod
    def _check_type_tag(raw: Any, path: str) -> list[Diagnostic]:
        if TokenType.parse(raw) is not None:
            return []
        return [
            _warning(
                "TYPE_001",
                path,
                f'Unknown token type: "{raw}"',
                f"Valid types: {', '.join(VALID_TOKEN_TYPES)}",
            )
        ]


def validate(document: Any) -> ValidationResult:
    """Validate a document with a default-configured TokenValidator."""
    return TokenValidator().validate(document)
