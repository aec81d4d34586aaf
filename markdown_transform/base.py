"""Base classes and protocols for edge functions.

Every edge in the transformation graph is a callable taking
``(input, parameters, options)``. Plain functions, coroutine functions and
instances of the classes below are all valid edges; the engine awaits the
result whenever it is awaitable.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Generic, Protocol, TypeVar, Union

# Type variables for generic transformers
TSource = TypeVar("TSource")
TTarget = TypeVar("TTarget")

# Keys of a plain base-graph entry that describe the format rather than an edge;
# fileFormat is accepted as an alias of file_format
METADATA_KEYS = frozenset({"docs", "file_format", "fileFormat"})


class EdgeFunction(Protocol):
    """Protocol defining the edge function interface.

    Args:
        input: The value in the edge's source format
        parameters: Caller-supplied context (model references, file names...).
            Shared by every hop of a transformation.
        options: Engine and format level toggles (e.g. ``verbose``).
            Shared by every hop of a transformation.

    Returns:
        The value in the edge's target format, or an awaitable resolving to it.
    """

    def __call__(
        self, input: Any, parameters: dict[str, Any], options: dict[str, Any]
    ) -> Union[Any, Awaitable[Any]]: ...


class BaseTransformer(ABC, Generic[TSource, TTarget]):
    """Abstract base class for class-based edges.

    Useful when a converter needs configuration or shared helper methods.
    Instances are callable with the edge signature, so they can be placed
    directly in a transformation graph.

    Subclasses must implement transform().
    """

    def __call__(
        self, source: TSource, parameters: dict[str, Any], options: dict[str, Any]
    ) -> TTarget:
        return self.transform(source, parameters, options)

    @abstractmethod
    def transform(
        self, source: TSource, parameters: dict[str, Any], options: dict[str, Any]
    ) -> TTarget:
        """Transform source value to the target format.

        See EdgeFunction protocol for detailed documentation.
        """
        pass


class TextTransformer(BaseTransformer[TSource, str]):
    """Base class for transformers that produce text output (utf8 formats)."""

    pass


class StructuredDataTransformer(BaseTransformer[TSource, dict]):
    """Base class for transformers that produce structured data (json formats)."""

    pass


__all__ = [
    "EdgeFunction",
    "BaseTransformer",
    "TextTransformer",
    "StructuredDataTransformer",
    "METADATA_KEYS",
    "TSource",
    "TTarget",
]
