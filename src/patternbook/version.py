"""Version information for patternbook."""

__version__ = "0.3.0"
