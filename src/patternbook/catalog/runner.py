"""
Demo and check runner.

Demos are run as-is and their exceptions propagate. Checks are the
opposite: every outcome, including an unexpected exception, is
captured as a CheckResult so a full report can be produced.
"""

import logging
import time
from typing import Iterable

from patternbook.catalog.entry import PatternEntry, check_name
from patternbook.models import CheckReport, CheckResult, CheckStatus, DemoResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def run_demo(entry: PatternEntry) -> DemoResult:
    """Run a pattern's demo and collect its transcript.

    Args:
        entry: Pattern to demonstrate

    Returns:
        DemoResult with the transcript lines
    """
    logger.info("Running demo: %s", entry.slug)
    start = time.perf_counter()
    lines = entry.demo()
    return DemoResult(slug=entry.slug, lines=list(lines), duration_ms=_elapsed_ms(start))


def run_checks(entry: PatternEntry) -> list[CheckResult]:
    """Run every sanity check attached to a pattern.

    Args:
        entry: Pattern whose checks to run

    Returns:
        One CheckResult per check, in declaration order
    """
    results = []
    for check in entry.checks:
        name = check_name(check)
        start = time.perf_counter()
        try:
            check()
        except AssertionError as e:
            status, message = CheckStatus.FAIL, str(e) or "assertion failed"
        except Exception as e:
            logger.debug("Check %s/%s raised", entry.slug, name, exc_info=True)
            status, message = CheckStatus.ERROR, f"{type(e).__name__}: {e}"
        else:
            status, message = CheckStatus.PASS, ""

        result = CheckResult(
            slug=entry.slug,
            name=name,
            status=status,
            message=message,
            duration_ms=_elapsed_ms(start),
        )
        if result.passed:
            logger.debug("Check passed: %s/%s", entry.slug, name)
        else:
            logger.info("Check %s: %s/%s: %s", status.value, entry.slug, name, message)
        results.append(result)
    return results


def run_all_checks(entries: Iterable[PatternEntry]) -> CheckReport:
    """Run the checks of several patterns into one report."""
    report = CheckReport()
    for entry in entries:
        report.results.extend(run_checks(entry))
    logger.info(
        "Checks finished: %d passed, %d failed, %d errors",
        report.passed,
        report.failed,
        report.errored,
    )
    return report
