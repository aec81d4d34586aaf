"""
Exception hierarchy for transformation engine errors.

Errors raised by edge functions are not part of this hierarchy: they propagate
to the caller exactly as the edge raised them.
"""


class TransformError(Exception):
    """Base exception for all transformation engine errors."""

    pass


class UnknownFormatError(TransformError):
    """Raised when an operation references a format that is not registered."""

    def __init__(self, format_name: str):
        super().__init__(f"Unknown format: {format_name}")
        self.format_name = format_name


class DuplicateFormatError(TransformError):
    """Raised when registering a format name that already exists."""

    def __init__(self, format_name: str):
        super().__init__(f"Format already exists: {format_name}")
        self.format_name = format_name


class NoPathError(TransformError):
    """Raised when two known formats are not connected by any chain of edges."""

    def __init__(self, source_format: str, destination_format: str):
        super().__init__(
            f"No transformation path from {source_format} to {destination_format}"
        )
        self.source_format = source_format
        self.destination_format = destination_format


class ExtensionLoadError(TransformError):
    """Raised when an extension reference cannot be resolved."""

    pass


__all__ = [
    "TransformError",
    "UnknownFormatError",
    "DuplicateFormatError",
    "NoPathError",
    "ExtensionLoadError",
]
