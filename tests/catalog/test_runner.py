"""Tests for the demo and check runner."""

import pytest

from patternbook.catalog import PatternEntry, check_name, run_all_checks, run_checks, run_demo
from patternbook.models import CheckStatus


class TestRunDemo:
    """Tests for run_demo."""

    def test_collects_transcript(self, sample_entry):
        result = run_demo(sample_entry)

        assert result.slug == "null-object"
        assert result.lines == ["nothing happened"]
        assert result.duration_ms >= 0

    def test_demo_exceptions_propagate(self, sample_doc):
        def broken_demo():
            raise RuntimeError("demo broke")

        entry = PatternEntry(doc=sample_doc, demo=broken_demo)

        with pytest.raises(RuntimeError, match="demo broke"):
            run_demo(entry)


class TestRunChecks:
    """Tests for run_checks."""

    def test_statuses_in_declaration_order(self, sample_entry):
        results = run_checks(sample_entry)

        assert [r.name for r in results] == ["passes", "fails", "errors"]
        assert [r.status for r in results] == [
            CheckStatus.PASS,
            CheckStatus.FAIL,
            CheckStatus.ERROR,
        ]

    def test_failure_and_error_messages(self, sample_entry):
        passed, failed, errored = run_checks(sample_entry)

        assert passed.message == ""
        assert failed.message == "wrong answer"
        assert errored.message == "RuntimeError: boom"

    def test_bare_assertion_gets_default_message(self, sample_doc):
        def check_bare():
            assert 1 == 2

        (result,) = run_checks(PatternEntry(doc=sample_doc, demo=list, checks=[check_bare]))

        assert result.status == CheckStatus.FAIL
        assert result.message

    def test_no_checks(self, sample_doc):
        assert run_checks(PatternEntry(doc=sample_doc, demo=list)) == []


class TestRunAllChecks:
    """Tests for run_all_checks."""

    def test_aggregates_across_entries(self, sample_entry):
        report = run_all_checks([sample_entry, sample_entry])

        assert (report.passed, report.failed, report.errored) == (2, 2, 2)
        assert not report.ok


class TestCheckName:
    """Tests for check_name."""

    def test_strips_prefix_and_underscores(self):
        def check_clone_is_distinct():
            pass

        assert check_name(check_clone_is_distinct) == "clone is distinct"

    def test_name_without_prefix(self):
        def verify_it():
            pass

        assert check_name(verify_it) == "verify it"
