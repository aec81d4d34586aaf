"""Transformers for JSON document envelopes."""

from collections.abc import Mapping
from typing import Any

from ..base import TextTransformer


class DocumentToMarkdownTransformer(TextTransformer[dict]):
    """Extract the Markdown content of a document envelope."""

    def transform(self, source: dict, parameters: dict[str, Any], options: dict[str, Any]) -> str:
        if not isinstance(source, Mapping) or "content" not in source:
            raise ValueError("Document must be a mapping with a 'content' key")
        return source["content"]


__all__ = ["DocumentToMarkdownTransformer"]
