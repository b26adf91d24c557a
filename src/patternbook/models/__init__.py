"""
Data models for the pattern catalog.

This module exports the enums, documentation records and result
models shared by the catalog, the runner and the CLI.
"""

from patternbook.models.base import CheckStatus, PatternCategory
from patternbook.models.pattern import SLUG_PATTERN, FaqEntry, PatternDoc
from patternbook.models.results import CheckReport, CheckResult, DemoResult

__all__ = [
    # Enums
    "PatternCategory",
    "CheckStatus",
    # Documentation
    "FaqEntry",
    "PatternDoc",
    "SLUG_PATTERN",
    # Results
    "DemoResult",
    "CheckResult",
    "CheckReport",
]
