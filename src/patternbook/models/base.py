"""
Base enumerations used throughout the data models.

These enums provide type-safe values for categorical fields and keep
the catalog, the runner and the CLI consistent with each other.
"""

from enum import Enum


class PatternCategory(str, Enum):
    """Gang of Four category a pattern belongs to."""

    CREATIONAL = "creational"  # How objects get created
    STRUCTURAL = "structural"  # How objects are composed
    BEHAVIORAL = "behavioral"  # How objects communicate


class CheckStatus(str, Enum):
    """Outcome of a single pattern sanity check."""

    PASS = "pass"  # Assertion held
    FAIL = "fail"  # AssertionError raised
    ERROR = "error"  # Any other exception raised
