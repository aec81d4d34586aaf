"""Transformers for outline trees produced by MarkdownToOutlineTransformer."""

from collections.abc import Mapping
from typing import Any

from ..base import TextTransformer


class OutlineToMarkdownTransformer(TextTransformer[dict]):
    """Render an outline tree back to Markdown.

    Sections are emitted depth-first as ATX headings followed by their
    content, separated by blank lines.
    """

    def transform(self, source: dict, parameters: dict[str, Any], options: dict[str, Any]) -> str:
        if not isinstance(source, Mapping) or "sections" not in source:
            raise ValueError("Outline must be a mapping with a 'sections' key")

        blocks = []
        if source.get("preamble"):
            blocks.append(source["preamble"])
        for section in source["sections"]:
            self._render_section(section, blocks)

        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def _render_section(self, section: Mapping[str, Any], blocks: list[str]) -> None:
        level = min(max(int(section.get("level", 1)), 1), 6)
        blocks.append(f"{'#' * level} {section['title']}")
        if section.get("content"):
            blocks.append(section["content"])
        for child in section.get("children", []):
            self._render_section(child, blocks)


__all__ = ["OutlineToMarkdownTransformer"]
