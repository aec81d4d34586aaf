"""Reading and writing documents according to a format's file format."""

import json
import sys
from pathlib import Path
from typing import Any

import yaml

from markdown_transform import FileFormat


def read_document(path: Path | None, file_format: FileFormat) -> Any:
    """Read a document from a file, or from stdin when no path is given.

    json documents are parsed, binary documents are returned as bytes and
    utf8 documents as text.
    """
    if file_format == FileFormat.BINARY:
        return path.read_bytes() if path else sys.stdin.buffer.read()

    text = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    if file_format == FileFormat.JSON:
        return json.loads(text)
    return text


def render_document(value: Any, file_format: FileFormat) -> str | bytes:
    """Serialize a transform result for output."""
    if file_format == FileFormat.JSON:
        return json.dumps(value, indent=2, ensure_ascii=False)
    if file_format == FileFormat.BINARY:
        return value if isinstance(value, bytes) else bytes(value)
    return value if isinstance(value, str) else str(value)


def write_document(path: Path, rendered: str | bytes):
    """Write a rendered document to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(rendered, bytes):
        path.write_bytes(rendered)
    else:
        path.write_text(rendered, encoding="utf-8")


def parse_parameters(pairs: list[str] | None) -> dict[str, Any]:
    """Parse ``key=value`` pairs into a parameters dict.

    Values are read as YAML scalars or flow collections, so ``count=3`` gives
    an int and ``meta={author: sam}`` gives a dict.

    Raises:
        ValueError: If a pair has no '='
    """
    parameters: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid parameter '{pair}', expected key=value")
        parameters[key.strip()] = yaml.safe_load(value) if value else ""
    return parameters
