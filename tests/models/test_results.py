"""Tests for demo and check result models."""

from patternbook.models import CheckReport, CheckResult, CheckStatus, DemoResult


def _result(slug: str, status: CheckStatus) -> CheckResult:
    return CheckResult(slug=slug, name="n", status=status)


class TestCheckReport:
    """Tests for CheckReport aggregation."""

    def test_empty_report_is_ok(self):
        """Test that a report with no results counts as ok."""
        report = CheckReport()

        assert report.ok
        assert (report.passed, report.failed, report.errored) == (0, 0, 0)

    def test_counts_by_status(self):
        """Test counting of each status."""
        report = CheckReport(
            results=[
                _result("a", CheckStatus.PASS),
                _result("a", CheckStatus.PASS),
                _result("b", CheckStatus.FAIL),
                _result("c", CheckStatus.ERROR),
            ]
        )

        assert report.passed == 2
        assert report.failed == 1
        assert report.errored == 1
        assert not report.ok

    def test_error_alone_is_not_ok(self):
        """Test that an erroring check makes the report fail."""
        assert not CheckReport(results=[_result("a", CheckStatus.ERROR)]).ok

    def test_for_pattern(self):
        """Test filtering results by pattern slug."""
        report = CheckReport(
            results=[_result("a", CheckStatus.PASS), _result("b", CheckStatus.FAIL)]
        )

        assert [r.slug for r in report.for_pattern("b")] == ["b"]

    def test_serializes_counts(self):
        """Test that computed counts appear in dumps."""
        dumped = CheckReport(results=[_result("a", CheckStatus.PASS)]).model_dump()

        assert dumped["passed"] == 1
        assert dumped["failed"] == 0


class TestDemoResult:
    """Tests for DemoResult model."""

    def test_defaults(self):
        """Test default transcript and duration."""
        result = DemoResult(slug="x")

        assert result.lines == []
        assert result.duration_ms == 0.0
