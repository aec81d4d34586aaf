"""
Resolve extension references of the form ``package.module:attribute``.

The attribute may be an Extension, a plain extension mapping, or a
zero-argument callable returning either of those.
"""

import importlib
import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import ExtensionLoadError
from .value_objects import Extension

logger = logging.getLogger(__name__)


def load_extension(reference: str) -> Extension:
    """Import and build the extension named by ``reference``.

    Args:
        reference: ``package.module:attribute``

    Returns:
        The resolved Extension

    Raises:
        ExtensionLoadError: If the reference is malformed, cannot be imported,
            or does not resolve to an extension
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ExtensionLoadError(
            f"Invalid extension reference '{reference}', expected 'package.module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ExtensionLoadError(f"Cannot import extension module '{module_name}': {e}") from e

    try:
        target: Any = getattr(module, attribute)
    except AttributeError as e:
        raise ExtensionLoadError(
            f"Module '{module_name}' has no attribute '{attribute}'"
        ) from e

    if callable(target) and not isinstance(target, (Extension, Mapping)):
        target = target()

    if isinstance(target, Extension):
        extension = target
    elif isinstance(target, Mapping):
        extension = Extension.from_mapping(target)
    else:
        raise ExtensionLoadError(
            f"Extension '{reference}' resolved to {type(target).__name__}, "
            "expected an Extension or a mapping"
        )

    logger.debug(f"Loaded extension {reference}")
    return extension


__all__ = ["load_extension"]
