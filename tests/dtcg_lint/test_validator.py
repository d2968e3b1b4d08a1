"""Tests for the document validator."""

import pytest

from dtcg_lint.models import Severity
from dtcg_lint.validator import TokenValidator, validate

SCHEMA = "https://tr.designtokens.org/format/"


def token_warnings(result):
    """Warnings below the document root."""
    return [w for w in result.warnings if w.path != "$.$schema"]


@pytest.fixture
def validator():
    return TokenValidator(require_schema=True)


def test_empty_document(validator):
    """Test that {} only warns about the missing $schema."""
    result = validator.validate({})

    assert result.errors == []
    assert len(result.warnings) == 1
    assert result.warnings[0].message == "Missing $schema"
    assert result.warnings[0].path == "$.$schema"
    assert result.valid


def test_legacy_value_without_type(validator):
    """Test legacy "value" key with an inferable color."""
    result = validator.validate({"colors": {"primary": {"value": "#E00069"}}})

    messages = [w.message for w in token_warnings(result)]
    assert messages == ["Legacy value key", 'Missing $type - inferred as "color"']
    assert result.errors == []
    assert result.valid

    missing_type = token_warnings(result)[1]
    assert missing_type.path == "$.colors.primary"
    assert missing_type.suggested_fix == {"$type": "color"}


def test_invalid_hex(validator):
    """Test that a malformed hex color is the only error."""
    result = validator.validate({"colors": {"primary": {"$value": "#ZZZ", "$type": "color"}}})

    assert len(result.errors) == 1
    assert result.errors[0].message == "Invalid hex color format"
    assert result.errors[0].path == "$.colors.primary.$value"
    assert not result.valid


def test_nested_tokens_reported(validator):
    """Test that nested clusters are reported while their tokens are still validated."""
    result = validator.validate({"colors": {"brand": {"hover": {"$value": "#111", "$type": "color"}}}})

    assert len(result.structure_issues) == 1
    issue = result.structure_issues[0]
    assert issue.issue == "NESTED_TOKENS"
    assert issue.path == "$.colors.brand"
    assert issue.auto_fixable
    assert "brand-hover" in issue.flattened_structure
    assert result.errors == []


@pytest.mark.parametrize(
    "document",
    [
        {},
        [],
        None,
        "tokens",
        {"colors": "red"},
        {"colors": {"primary": "#E00069"}},
        {"colors": {"primary": {}}},
        {"colors": {"primary": {"$value": "#ZZZ", "$type": "color"}}},
        {"$schema": SCHEMA, "colors": {"primary": {"$value": "#E00069", "$type": "color"}}},
        {"brand": "Acme"},
    ],
)
def test_valid_iff_no_errors(validator, document):
    """Test that validity is decided by errors alone."""
    result = validator.validate(document)
    assert result.valid == (len(result.errors) == 0)


@pytest.mark.parametrize("document", [[1, 2], None, "tokens", 42])
def test_non_object_document(validator, document):
    """Test that anything but an object is rejected with a single root error."""
    result = validator.validate(document)

    assert len(result.errors) == 1
    assert result.errors[0].path == "$"
    assert result.errors[0].message == "Invalid JSON structure"
    assert result.warnings == []
    assert result.structure_issues == []


def test_schema_not_required():
    """Test that the missing-$schema warning can be turned off."""
    result = TokenValidator(require_schema=False).validate({})
    assert result.is_clean


def test_schema_requirement_from_env(monkeypatch):
    """Test that DTCG_REQUIRE_SCHEMA configures the default validator."""
    monkeypatch.setenv("DTCG_REQUIRE_SCHEMA", "false")
    assert validate({}).is_clean

    monkeypatch.setenv("DTCG_REQUIRE_SCHEMA", "true")
    assert len(validate({}).warnings) == 1


def test_schema_url_in_hint():
    """Test that the configured schema URL is suggested."""
    result = TokenValidator(require_schema=True, schema_url="https://example.com/schema.json").validate({})
    assert "https://example.com/schema.json" in result.warnings[0].hint


def test_non_string_schema(validator):
    """Test that $schema must be a string."""
    result = validator.validate({"$schema": 1})
    assert [e.rule_id for e in result.errors] == ["ROOT_003"]


def test_unknown_root_metadata_key(validator):
    """Test that unrecognised $-keys at the root warn."""
    result = validator.validate({"$schema": SCHEMA, "$foo": True})

    assert [w.rule_id for w in result.warnings] == ["ROOT_004"]
    assert result.warnings[0].path == "$.$foo"


def test_group_must_be_object(validator):
    """Test that a top-level group that isn't an object is an error."""
    result = validator.validate({"$schema": SCHEMA, "colors": "red"})

    assert len(result.errors) == 1
    assert result.errors[0].message == 'Token group "colors" must be an object'
    assert result.errors[0].actual_structure == "red"


def test_token_must_be_object(validator):
    """Test that bare values inside a group are errors with an example fix."""
    result = validator.validate({"$schema": SCHEMA, "colors": {"primary": "#E00069"}})

    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.message == "Token must be an object"
    assert error.path == "$.colors.primary"
    assert error.correct_example == {"$value": "#E00069", "$type": "color"}


def test_token_missing_value(validator):
    """Test that an empty token is missing its $value."""
    result = validator.validate({"$schema": SCHEMA, "colors": {"primary": {}}})

    assert len(result.errors) == 1
    assert result.errors[0].message == 'Token missing "$value" property'


def test_legacy_type_key(validator):
    """Test that the legacy "type" key warns but is still used."""
    result = validator.validate({"$schema": SCHEMA, "colors": {"primary": {"$value": "#GGG", "type": "color"}}})

    assert [w.message for w in result.warnings] == ["Legacy type key"]
    assert [e.rule_id for e in result.errors] == ["COLOR_002"]


def test_unknown_type(validator):
    """Test that an unknown $type warns and skips value checks."""
    result = validator.validate({"$schema": SCHEMA, "colors": {"primary": {"$value": 12, "$type": "colour"}}})

    assert result.errors == []
    assert len(result.warnings) == 1
    assert result.warnings[0].message == 'Unknown token type: "colour"'
    assert result.warnings[0].path == "$.colors.primary.$type"


def test_group_type_is_inherited(validator):
    """Test that tokens take the $type of their group."""
    document = {"$schema": SCHEMA, "colors": {"$type": "color", "primary": {"$value": "#GGG"}}}

    result = validator.validate(document)

    assert [e.rule_id for e in result.errors] == ["COLOR_002"]
    assert result.warnings == []


def test_root_type_is_inherited(validator):
    """Test that a root $type applies to every group."""
    document = {"$schema": SCHEMA, "$type": "dimension", "space": {"sm": {"$value": "small"}}}

    result = validator.validate(document)

    assert [e.rule_id for e in result.errors] == ["DIMENSION_002"]


def test_nearest_group_type_wins(validator):
    """Test that a subgroup's $type overrides its parent's."""
    document = {
        "$schema": SCHEMA,
        "theme": {
            "$type": "color",
            "space": {"$type": "dimension", "sm": {"$value": "4px"}},
        },
    }
    result = validator.validate(document)

    assert result.errors == []
    assert result.warnings == []


def test_aliases_are_not_validated(validator):
    """Test that references pass without resolution."""
    document = {"$schema": SCHEMA, "colors": {"link": {"$value": "{colors.primary}", "$type": "color"}}}
    assert validator.validate(document).is_clean


def test_brand_must_be_object(validator):
    """Test that non-object brand metadata is an error."""
    result = validator.validate({"$schema": SCHEMA, "brand": "Acme"})
    assert [e.rule_id for e in result.errors] == ["BRAND_001"]


def test_brand_name_missing(validator):
    """Test that brand metadata without a name warns."""
    result = validator.validate({"$schema": SCHEMA, "brand": {"siteTitle": "Acme"}})

    assert result.errors == []
    assert [w.path for w in result.warnings] == ["$.brand.name"]


def test_brand_is_not_validated_as_tokens(validator):
    """Test that brand fields are not treated as tokens."""
    result = validator.validate({"$schema": SCHEMA, "brand": {"name": "Acme", "logo": "logo.svg"}})
    assert result.is_clean


def test_validator_is_reusable(validator):
    """Test that results don't leak between calls."""
    document = {"colors": {"primary": {"$value": "#ZZZ", "$type": "color"}}}

    first = validator.validate(document)
    second = validator.validate(document)

    assert len(first.errors) == len(second.errors) == 1
    assert first is not second


def test_result_to_dict(validator):
    """Test the serialized result shape."""
    data = validator.validate({"colors": {"primary": {"$value": "#ZZZ", "$type": "color"}}}).to_dict()

    assert data["valid"] is False
    assert data["errors"][0]["severity"] == Severity.ERROR.value
    assert data["errors"][0]["ruleId"] == "COLOR_002"
    assert data["structureIssues"] == []
