"""The built-in transformation graph.

Engines clone this mapping on construction, so registering formats or edges
on an engine never changes it.
"""

from .enums import FileFormat
from .transformers import (
    DocumentToMarkdownTransformer,
    HtmlToMarkdownTransformer,
    MarkdownToDocumentTransformer,
    MarkdownToOutlineTransformer,
    MarkdownToPlaintextTransformer,
    OutlineToMarkdownTransformer,
    PlaintextToMarkdownTransformer,
)

BUILTIN_TRANSFORMATION_GRAPH = {
    "markdown": {
        "docs": "Markdown (string)",
        "file_format": FileFormat.UTF8,
        "outline": MarkdownToOutlineTransformer(),
        "plaintext": MarkdownToPlaintextTransformer(),
        "document": MarkdownToDocumentTransformer(),
    },
    "plaintext": {
        "docs": "Plain text (string)",
        "file_format": FileFormat.UTF8,
        "markdown": PlaintextToMarkdownTransformer(),
    },
    "outline": {
        "docs": "Heading outline tree (JSON)",
        "file_format": FileFormat.JSON,
        "markdown": OutlineToMarkdownTransformer(),
    },
    "document": {
        "docs": "Markdown document with title and metadata (JSON)",
        "file_format": FileFormat.JSON,
        "markdown": DocumentToMarkdownTransformer(),
    },
    "html": {
        "docs": "HTML (string)",
        "file_format": FileFormat.UTF8,
        "markdown": HtmlToMarkdownTransformer(),
    },
}


__all__ = ["BUILTIN_TRANSFORMATION_GRAPH"]
