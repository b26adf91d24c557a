"""
Source lookup for pattern snippets.
"""

import importlib
import inspect

from patternbook.catalog.entry import PatternEntry


def get_source(entry: PatternEntry) -> str:
    """Return the source text of the module defining a pattern.

    Raises:
        ValueError: If the entry does not name its module
        OSError: If the source is not available (e.g. bytecode-only install)
    """
    if not entry.module:
        raise ValueError(f"Pattern '{entry.slug}' does not name its module")
    module = importlib.import_module(entry.module)
    return inspect.getsource(module)
