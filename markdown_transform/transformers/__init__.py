"""Concrete transformer implementations.

This package contains the converters behind the built-in formats. Each module
is organized by source format:

- markdown.py: Transformers for Markdown text
- outline.py: Transformers for outline trees
- document.py: Transformers for JSON document envelopes
- html.py: Transformers for HTML text
- plaintext.py: Transformers for plain text

Nothing is registered on import; builtins.py assembles the instances into
the built-in transformation graph.
"""

from .document import DocumentToMarkdownTransformer
from .html import HtmlToMarkdownTransformer
from .markdown import (
    MarkdownToDocumentTransformer,
    MarkdownToOutlineTransformer,
    MarkdownToPlaintextTransformer,
)
from .outline import OutlineToMarkdownTransformer
from .plaintext import PlaintextToMarkdownTransformer

__all__ = [
    "DocumentToMarkdownTransformer",
    "HtmlToMarkdownTransformer",
    "MarkdownToDocumentTransformer",
    "MarkdownToOutlineTransformer",
    "MarkdownToPlaintextTransformer",
    "OutlineToMarkdownTransformer",
    "PlaintextToMarkdownTransformer",
]
