"""Transformers for Markdown text.

This module contains the edges leaving the ``markdown`` format:

- markdown -> outline: heading tree
- markdown -> plaintext: inline formatting removed
- markdown -> document: JSON envelope with title and metadata
"""

import re
from collections.abc import Iterator
from typing import Any

from ..base import StructuredDataTransformer, TextTransformer

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
FENCE_RE = re.compile(r"^\s*(```|~~~)")

# Inline formatting rules, applied in order; images before links so the
# leading "!" goes away with the image syntax.
INLINE_RULES = [
    (re.compile(r"!\[([^\]]*)\]\([^)]*\)"), r"\1"),  # images
    (re.compile(r"\[([^\]]+)\]\([^)]*\)"), r"\1"),  # links
    (re.compile(r"`([^`]*)`"), r"\1"),  # inline code
    (re.compile(r"(\*\*|__)(.+?)\1"), r"\2"),  # strong
    (re.compile(r"\*(.+?)\*"), r"\1"),  # emphasis
    (re.compile(r"(?<!\w)_(.+?)_(?!\w)"), r"\1"),  # emphasis
    (re.compile(r"~~(.+?)~~"), r"\1"),  # strikethrough
    (re.compile(r"<[^>\n]+>"), ""),  # inline html
]

BLOCK_RULES = [
    (re.compile(r"^#{1,6}\s+"), ""),  # heading markers
    (re.compile(r"^\s*>\s?"), ""),  # block quotes
]


def iter_lines(content: str) -> Iterator[tuple[str, bool]]:
    """Yield (line, is_code) pairs, flagging fence markers and fenced lines."""
    in_fence = False
    for line in content.split("\n"):
        if FENCE_RE.match(line):
            in_fence = not in_fence
            yield line, True
        else:
            yield line, in_fence


def first_heading(content: str, level: int = 1) -> str | None:
    """Return the title of the first heading of the given level, if any."""
    for line, is_code in iter_lines(content):
        if is_code:
            continue
        match = HEADING_RE.match(line)
        if match and len(match.group(1)) == level:
            return match.group(2).strip()
    return None


class MarkdownToOutlineTransformer(StructuredDataTransformer[str]):
    """Convert Markdown to hierarchical outline structure.

    Parses markdown headers (ATX style: # Header) to build a tree structure
    where each section contains its header level, title, content, and children.
    Lines inside fenced code blocks are never treated as headers.
    """

    def transform(self, source: str, parameters: dict[str, Any], options: dict[str, Any]) -> dict:
        """Transform Markdown to outline structure.

        Returns:
            dict: Tree structure with root sections and nested children
                {
                    "preamble": "Text before the first heading",  # only if any
                    "sections": [
                        {
                            "id": "section-1",
                            "level": 1,
                            "title": "Section Title",
                            "content": "Section text content...",
                            "parent_id": None,
                            "children": [...]
                        }
                    ]
                }
        """
        if not source:
            return {"sections": []}

        sections = []
        current_section = None
        section_counter = 0
        content_buffer = []
        preamble = ""

        # Stack to track parent sections at each level
        # Index represents header level (0 = h1, 1 = h2, etc.)
        level_stack = [None] * 6

        for line, is_code in iter_lines(source):
            header_match = None if is_code else HEADING_RE.match(line)

            if header_match is None:
                content_buffer.append(line)
                continue

            # Flush what was collected since the previous header
            text = "\n".join(content_buffer).strip()
            content_buffer = []
            if current_section is None:
                preamble = text
            else:
                current_section["content"] = text
                sections.append(current_section)

            level = len(header_match.group(1))
            section_counter += 1

            # Nearest open section at a shallower level
            parent_id = None
            for depth in range(level - 2, -1, -1):
                if level_stack[depth] is not None:
                    parent_id = level_stack[depth]
                    break

            current_section = {
                "id": f"section-{section_counter}",
                "level": level,
                "title": header_match.group(2).strip(),
                "content": "",
                "parent_id": parent_id,
                "children": [],
            }

            level_stack[level - 1] = current_section["id"]
            for i in range(level, 6):
                level_stack[i] = None

        text = "\n".join(content_buffer).strip()
        if current_section is None:
            preamble = text
        else:
            current_section["content"] = text
            sections.append(current_section)

        # Organize into parent-child relationships
        section_map = {s["id"]: s for s in sections}
        root_sections = []
        for section in sections:
            if section["parent_id"] is None:
                root_sections.append(section)
            else:
                section_map[section["parent_id"]]["children"].append(section)

        result: dict[str, Any] = {"sections": root_sections}
        if preamble:
            result["preamble"] = preamble
        return result


class MarkdownToPlaintextTransformer(TextTransformer[str]):
    """Remove inline formatting from Markdown while keeping its line structure.

    Fence markers are dropped; the content of fenced code is kept verbatim.
    """

    def transform(self, source: str, parameters: dict[str, Any], options: dict[str, Any]) -> str:
        lines = []
        for line, is_code in iter_lines(source):
            if FENCE_RE.match(line):
                continue
            if not is_code:
                for pattern, replacement in BLOCK_RULES:
                    line = pattern.sub(replacement, line)
                for pattern, replacement in INLINE_RULES:
                    line = pattern.sub(replacement, line)
            lines.append(line)
        return "\n".join(lines)


class MarkdownToDocumentTransformer(StructuredDataTransformer[str]):
    """Wrap Markdown in a JSON document envelope.

    Parameters used:
        title: Explicit title; defaults to the first level-1 heading
        metadata: Optional dict copied into the envelope
    """

    def transform(self, source: str, parameters: dict[str, Any], options: dict[str, Any]) -> dict:
        result: dict[str, Any] = {"content": source}

        title = parameters.get("title") or first_heading(source)
        if title:
            result["title"] = title

        metadata = parameters.get("metadata")
        if metadata:
            result["metadata"] = dict(metadata)

        return result


__all__ = [
    "MarkdownToOutlineTransformer",
    "MarkdownToPlaintextTransformer",
    "MarkdownToDocumentTransformer",
    "first_heading",
    "iter_lines",
]
