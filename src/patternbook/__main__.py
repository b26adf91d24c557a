"""
Patternbook package entry point.

Allows running patternbook as a module:
    python -m patternbook
"""

from patternbook.cli import main

if __name__ == "__main__":
    main()
