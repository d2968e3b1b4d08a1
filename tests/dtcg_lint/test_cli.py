"""Tests for the command line interface."""

import json

from dtcg_lint.cli import cmd_autofix, cmd_fix, cmd_validate


class Args:
    """Mock arguments for testing."""

    def __init__(self, **kwargs):
        self.file = kwargs.get("file", "tokens.json")
        self.format = kwargs.get("format", "console")
        self.output = kwargs.get("output", None)
        self.errors_only = kwargs.get("errors_only", False)
        self.yes = kwargs.get("yes", False)
        self.dry_run = kwargs.get("dry_run", False)


def write_tokens(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_json_output_to_file(tmp_path):
    """Test that JSON results can be written to a file."""
    tokens = write_tokens(tmp_path / "tokens.json", {"colors": {"primary": {"$value": "#ZZZ", "$type": "color"}}})
    output_file = tmp_path / "output.json"

    exit_code = cmd_validate(Args(file=str(tokens), format="json", output=str(output_file)))

    assert exit_code == 1
    data = json.loads(output_file.read_text(encoding="utf-8"))
    assert data["valid"] is False
    assert len(data["errors"]) == 1


def test_json_output_to_stdout(tmp_path, capsys):
    """Test that JSON results are printed without --output."""
    tokens = write_tokens(tmp_path / "tokens.json", {"$schema": "x", "colors": {}})

    exit_code = cmd_validate(Args(file=str(tokens), format="json"))

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["valid"] is True


def test_console_output_to_file(tmp_path):
    """Test that console output can be written to a file."""
    tokens = write_tokens(tmp_path / "tokens.json", {"colors": {"primary": {"$value": "#fff", "$type": "color"}}})
    output_file = tmp_path / "output.txt"

    exit_code = cmd_validate(Args(file=str(tokens), output=str(output_file)))

    assert exit_code == 0
    assert output_file.exists()
    assert "Total:" in output_file.read_text(encoding="utf-8")


def test_validate_missing_file(tmp_path):
    """Test that an unreadable document exits with 1."""
    assert cmd_validate(Args(file=str(tmp_path / "missing.json"))) == 1


def test_validate_invalid_json(tmp_path):
    """Test that a parse failure exits with 1."""
    tokens = tmp_path / "tokens.json"
    tokens.write_text("{not json", encoding="utf-8")

    assert cmd_validate(Args(file=str(tokens), format="json")) == 1


def test_autofix_to_file(tmp_path):
    """Test that autofix writes the normalized document."""
    tokens = write_tokens(tmp_path / "tokens.json", {"colors": {"primary": {"value": "#E00069"}}})
    output_file = tmp_path / "fixed.json"

    assert cmd_autofix(Args(file=str(tokens), output=str(output_file))) == 0

    fixed = json.loads(output_file.read_text(encoding="utf-8"))
    assert fixed["colors"]["primary"]["$type"] == "color"
    assert fixed["colors"]["primary"]["$value"]["hex"] == "#E00069"


def test_autofix_to_stdout(tmp_path, capsys):
    """Test that autofix prints the result without --output."""
    tokens = write_tokens(tmp_path / "tokens.json", {"space": {"sm": "4px"}})

    assert cmd_autofix(Args(file=str(tokens))) == 0

    fixed = json.loads(capsys.readouterr().out)
    assert fixed["space"]["sm"] == {"$value": {"value": 4, "unit": "px"}, "$type": "dimension"}


def test_fix_with_yes(tmp_path):
    """Test that fix -y applies and writes every fix."""
    tokens = write_tokens(tmp_path / "tokens.json", {"colors": {"brand": {"hover": {"$value": "#111", "$type": "color"}}}})

    assert cmd_fix(Args(file=str(tokens), yes=True)) == 0

    fixed = json.loads(tokens.read_text(encoding="utf-8"))
    assert fixed == {"colors": {"brand-hover": {"$value": "#111", "$type": "color"}}}


def test_fix_missing_file(tmp_path):
    """Test that fix reports an unreadable document."""
    assert cmd_fix(Args(file=str(tmp_path / "missing.json"), yes=True)) == 1
