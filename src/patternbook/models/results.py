"""
Result models for demo runs and sanity checks.
"""

from pydantic import BaseModel, Field, computed_field

from patternbook.models.base import CheckStatus


class DemoResult(BaseModel):
    """Transcript produced by running a pattern demo.

    Attributes:
        slug: Pattern the demo belongs to
        lines: Output lines in the order they were produced
        duration_ms: Wall-clock time of the run
    """

    slug: str
    lines: list[str] = Field(default_factory=list)
    duration_ms: float = Field(default=0.0, ge=0.0)


class CheckResult(BaseModel):
    """Outcome of one sanity check.

    Attributes:
        slug: Pattern the check belongs to
        name: Check name
        status: Pass, fail or error
        message: Failure or error detail (empty on pass)
        duration_ms: Wall-clock time of the check
    """

    slug: str
    name: str
    status: CheckStatus
    message: str = ""
    duration_ms: float = Field(default=0.0, ge=0.0)

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASS


class CheckReport(BaseModel):
    """Aggregated results of running checks across several patterns."""

    results: list[CheckResult] = Field(default_factory=list)

    @computed_field
    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.PASS)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.FAIL)

    @computed_field
    @property
    def errored(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.ERROR)

    @property
    def ok(self) -> bool:
        """True when every check passed."""
        return self.failed == 0 and self.errored == 0

    def for_pattern(self, slug: str) -> list[CheckResult]:
        """Results belonging to one pattern."""
        return [r for r in self.results if r.slug == slug]
