"""Tests for interactive fix approval."""

import json

import pytest

from dtcg_lint.interactive_fixer import InteractiveFixer

DOCUMENT = {
    "colors": {
        "primary": {"$value": "#E00069"},
        "brand": {"hover": {"$value": "#111", "$type": "color"}},
    }
}


@pytest.fixture
def document_path(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return path


def test_auto_yes_applies_everything(document_path):
    """Test that every fix is approved and written."""
    stats = InteractiveFixer(document_path).run(auto_yes=True)

    assert stats == {"total": 2, "approved": 2, "skipped": 0, "conflicts": 0}
    written = json.loads(document_path.read_text(encoding="utf-8"))
    assert written["colors"]["primary"]["$type"] == "color"
    assert "brand-hover" in written["colors"]


def test_output_path(document_path, tmp_path):
    """Test that the result can go to a separate file."""
    output = tmp_path / "fixed.json"

    InteractiveFixer(document_path, output_path=output).run(auto_yes=True)

    assert json.loads(document_path.read_text(encoding="utf-8")) == DOCUMENT
    assert "brand-hover" in json.loads(output.read_text(encoding="utf-8"))["colors"]


def test_dry_run_writes_nothing(document_path):
    """Test that dry run leaves the document alone."""
    stats = InteractiveFixer(document_path).run(auto_yes=True, dry_run=True)

    assert stats["approved"] == 2
    assert json.loads(document_path.read_text(encoding="utf-8")) == DOCUMENT


def test_prompt_answers(document_path, monkeypatch):
    """Test that "n" skips a fix and "y" approves one."""
    answers = iter(["n", "y"])
    monkeypatch.setattr("builtins.input", lambda _: next(answers))

    stats = InteractiveFixer(document_path).run()

    assert stats["approved"] == 1
    assert stats["skipped"] == 1
    written = json.loads(document_path.read_text(encoding="utf-8"))
    assert "$type" not in written["colors"]["primary"]
    assert "brand-hover" in written["colors"]


def test_quit_stops_early(document_path, monkeypatch):
    """Test that "q" ends the session without writing."""
    monkeypatch.setattr("builtins.input", lambda _: "q")

    stats = InteractiveFixer(document_path).run()

    assert stats["approved"] == 0
    assert json.loads(document_path.read_text(encoding="utf-8")) == DOCUMENT


def test_overlapping_fixes_counted_as_conflicts(tmp_path):
    """Test that a fix overlapping an approved one is skipped."""
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"colors": {"brand": {"hover": {"$value": "#111"}}}}), encoding="utf-8")

    stats = InteractiveFixer(path).run(auto_yes=True)

    assert stats == {"total": 2, "approved": 1, "skipped": 0, "conflicts": 1}


def test_no_fixes(tmp_path):
    """Test a document with nothing to fix."""
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"colors": {"primary": {"$value": "#fff", "$type": "color"}}}), encoding="utf-8")

    stats = InteractiveFixer(path).run(auto_yes=True)

    assert stats["total"] == 0


def test_paths_with_brackets_are_shown(tmp_path, capsys):
    """Test that token names containing brackets are printed literally."""
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"space": {"size[lg]": {"$value": "16px"}}}), encoding="utf-8")

    InteractiveFixer(path).run(auto_yes=True, dry_run=True)

    assert "size[lg]" in capsys.readouterr().out
