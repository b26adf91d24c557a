"""
Pattern catalog: registration, lookup, demos and checks.
"""

from patternbook.catalog.entry import CheckFunc, DemoFunc, PatternEntry, check_name
from patternbook.catalog.registry import (
    BUILTIN_MODULES,
    PatternLoadError,
    PatternNotFoundError,
    PatternRegistry,
    get_pattern,
    get_registry,
    load_builtin_patterns,
    load_modules,
    register_pattern,
)
from patternbook.catalog.runner import run_all_checks, run_checks, run_demo
from patternbook.catalog.source import get_source

__all__ = [
    # Entries
    "PatternEntry",
    "DemoFunc",
    "CheckFunc",
    "check_name",
    # Registry
    "PatternRegistry",
    "PatternNotFoundError",
    "PatternLoadError",
    "BUILTIN_MODULES",
    "register_pattern",
    "get_pattern",
    "get_registry",
    "load_modules",
    "load_builtin_patterns",
    # Runner
    "run_demo",
    "run_checks",
    "run_all_checks",
    "get_source",
]
