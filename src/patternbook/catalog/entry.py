"""
Catalog entry binding a pattern's prose to its runnable parts.
"""

from dataclasses import dataclass, field
from typing import Callable

from patternbook.models import PatternCategory, PatternDoc

# A demo returns its transcript, one string per output line
DemoFunc = Callable[[], list[str]]

# A check returns nothing and raises AssertionError when the pattern is violated
CheckFunc = Callable[[], None]


@dataclass
class PatternEntry:
    """A registered pattern.

    Attributes:
        doc: Prose description of the pattern
        demo: Callable producing the demo transcript
        checks: Pattern-definition sanity checks
        module: Dotted name of the module defining the snippet
    """

    doc: PatternDoc
    demo: DemoFunc
    checks: list[CheckFunc] = field(default_factory=list)
    module: str = ""

    @property
    def slug(self) -> str:
        return self.doc.slug

    @property
    def name(self) -> str:
        return self.doc.name

    @property
    def category(self) -> PatternCategory:
        return self.doc.category


def check_name(check: CheckFunc) -> str:
    """Human-readable name of a check function.

    `check_clone_is_distinct` becomes "clone is distinct".
    """
    name = getattr(check, "__name__", repr(check))
    if name.startswith("check_"):
        name = name[len("check_"):]
    return name.replace("_", " ")
