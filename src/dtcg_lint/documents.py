"""Reading and writing token documents for the command line."""

import json
from pathlib import Path
from typing import Any

from common.constants import DOCUMENT_ENCODING
from common.env import env


class TokenLintError(Exception):
    """Base exception for dtcg-lint failures outside document validation."""

    pass


class DocumentLoadError(TokenLintError):
    """Raised when a token document cannot be read or parsed.

    Attributes:
        path: The file that failed to load
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to load {path}: {reason}")


def load_document(path: Path) -> Any:
    """Read and parse a JSON token document.

    Args:
        path: File to read

    Returns:
        The parsed JSON value (not necessarily an object)

    Raises:
        DocumentLoadError: If the file cannot be read or is not valid JSON
    """
    try:
        text = path.read_text(encoding=DOCUMENT_ENCODING)
    except OSError as e:
        raise DocumentLoadError(path, e.strerror or str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(path, f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e


def dump_document(document: Any, indent: int | None = None) -> str:
    """Serialize a document the way the CLI writes it."""
    return json.dumps(document, indent=env.json_indent() if indent is None else indent, ensure_ascii=False) + "\n"


def write_document(document: Any, path: Path, indent: int | None = None) -> None:
    """Write a document to disk as JSON."""
    path.write_text(dump_document(document, indent), encoding=DOCUMENT_ENCODING)
