"""Transformers for plain text."""

from typing import Any

from ..base import TextTransformer


class PlaintextToMarkdownTransformer(TextTransformer[str]):
    """Pass-through transformer: plain text is already valid Markdown."""

    def transform(self, source: str, parameters: dict[str, Any], options: dict[str, Any]) -> str:
        return source


__all__ = ["PlaintextToMarkdownTransformer"]
