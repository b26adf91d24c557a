"""
Patternbook: A Catalog of Classic Object-Oriented Design Patterns.

Each Gang of Four pattern is described in prose, illustrated by a small
self-contained snippet, and shipped with a runnable demo and a handful of
sanity checks that pin down what the pattern means.

Key Features:
- Creational, structural and behavioral patterns, one module each
- Registry lookup by slug, alias or display name
- Demos that return their transcript instead of printing
- Pattern-definition checks runnable from the command line

Example:
    from patternbook import get_pattern, load_builtin_patterns, run_demo

    load_builtin_patterns()
    result = run_demo(get_pattern("decorator"))
    print("\\n".join(result.lines))
"""

from patternbook.catalog import (
    PatternEntry,
    PatternNotFoundError,
    get_pattern,
    get_registry,
    load_builtin_patterns,
    register_pattern,
    run_all_checks,
    run_checks,
    run_demo,
)
from patternbook.models import PatternCategory, PatternDoc
from patternbook.version import __version__

__all__ = [
    "__version__",
    "PatternCategory",
    "PatternDoc",
    "PatternEntry",
    "PatternNotFoundError",
    "get_pattern",
    "get_registry",
    "load_builtin_patterns",
    "register_pattern",
    "run_all_checks",
    "run_checks",
    "run_demo",
]
