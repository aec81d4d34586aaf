"""Transformers for HTML text."""

import logging
import re
from typing import Any

from markdownify import ATX, markdownify

from ..base import TextTransformer

logger = logging.getLogger(__name__)


class HtmlToMarkdownTransformer(TextTransformer[str]):
    """Convert HTML to Markdown with ATX headings.

    Options used:
        heading_style: markdownify heading style, ATX by default
    """

    def transform(self, source: str, parameters: dict[str, Any], options: dict[str, Any]) -> str:
        markdown = markdownify(source, heading_style=options.get("heading_style", ATX))
        markdown = self._clean_markdown(markdown)
        logger.debug(f"Converted {len(source)} chars of HTML to {len(markdown)} chars of markdown")
        return markdown

    def _clean_markdown(self, markdown: str) -> str:
        """Clean up markdown content."""
        # Remove excessive newlines (more than 2 consecutive)
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)
        # Remove excessive whitespace
        markdown = re.sub(r"[ \t]+\n", "\n", markdown)
        return markdown.strip()


__all__ = ["HtmlToMarkdownTransformer"]
