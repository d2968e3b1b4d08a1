"""Tests for reading and writing token documents."""

import pytest

from dtcg_lint.documents import DocumentLoadError, TokenLintError, dump_document, load_document, write_document


def test_load_document(tmp_path):
    """Test reading a JSON document."""
    path = tmp_path / "tokens.json"
    path.write_text('{"colors": {"primary": {"$value": "#E00069"}}}', encoding="utf-8")

    assert load_document(path) == {"colors": {"primary": {"$value": "#E00069"}}}


def test_load_missing_file(tmp_path):
    """Test that a missing file raises DocumentLoadError."""
    path = tmp_path / "missing.json"

    with pytest.raises(DocumentLoadError) as exc_info:
        load_document(path)

    assert exc_info.value.path == path
    assert str(exc_info.value).startswith(f"Failed to load {path}")


def test_load_invalid_json(tmp_path):
    """Test that unparseable JSON raises with its location."""
    path = tmp_path / "broken.json"
    path.write_text('{"colors": ', encoding="utf-8")

    with pytest.raises(TokenLintError, match="invalid JSON at line 1"):
        load_document(path)


def test_load_non_object_json(tmp_path):
    """Test that valid JSON of any shape is returned for the validator to judge."""
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert load_document(path) == [1, 2]


def test_dump_document_indent(monkeypatch):
    """Test that DTCG_JSON_INDENT controls the output indentation."""
    monkeypatch.setenv("DTCG_JSON_INDENT", "4")

    text = dump_document({"a": 1})

    assert text == '{\n    "a": 1\n}\n'
    assert dump_document({"a": 1}, indent=0) == '{\n"a": 1\n}\n'


def test_write_document_keeps_unicode(tmp_path):
    """Test that non-ASCII text is written as-is."""
    path = tmp_path / "out.json"

    write_document({"brand": {"name": "Café"}}, path)

    assert "Café" in path.read_text(encoding="utf-8")
    assert load_document(path) == {"brand": {"name": "Café"}}
