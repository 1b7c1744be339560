from __future__ import annotations

import logging
from typing import Iterable, Literal

from eztest.case import DEFAULT_LOGGER_NAME, TestCase
from eztest.reporting.console import ConsoleReporter
from eztest.results import RunSummary, TestCaseInfo

ExitCodePolicy = Literal["capped", "count"]

MAX_EXIT_STATUS = 255


def exit_status(failed: int, policy: ExitCodePolicy = "capped") -> int:
    """Turn a failed-case count into a process exit status.

    ``"count"`` returns the count unchanged; on platforms that keep only the
    low 8 bits of the status, 256 failures then read as success. ``"capped"``
    saturates at 255 instead.
    """
    if policy == "count":
        return failed
    if policy == "capped":
        return min(failed, MAX_EXIT_STATUS)
    raise ValueError(f"Unknown exit code policy: {policy!r}")


class Suite:
    """An ordered, fixed list of test cases run together."""

    def __init__(self, name: str, cases: Iterable[TestCase]) -> None:
        cases = tuple(cases)
        if not cases:
            raise ValueError(f"Suite '{name}' must contain at least one test case")
        for case in cases:
            if not isinstance(case, TestCase):
                raise TypeError(
                    f"Suite '{name}' expects TestCase objects, got {case!r}; "
                    "declare it with @test_case"
                )
        self._name = name
        self._cases = cases

    @property
    def name(self) -> str:
        return self._name

    @property
    def cases(self) -> tuple[TestCase, ...]:
        return self._cases

    def __repr__(self) -> str:
        names = ", ".join(case.name for case in self._cases)
        return f"Suite({self._name!r}, [{names}])"

    def execute(
        self,
        reporter: ConsoleReporter | None = None,
        logger: logging.Logger | None = None,
    ) -> RunSummary:
        """Run every case in order and report as each one finishes."""
        reporter = reporter or ConsoleReporter()
        logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

        logger.debug(f"Starting suite '{self._name}' with {len(self._cases)} case(s)")
        summary = RunSummary(name=self._name)
        for case in self._cases:
            info = TestCaseInfo()
            case(info, reporter=reporter, logger=logger)
            reporter.case_finished(info)
            summary.results.append((case.name, info))
            logger.debug(
                f"Test case '{case.name}' finished {info.verdict.value}: "
                f"{info.passed_expectations}/{info.total_expectations} expectations"
            )

        reporter.summary(summary)
        logger.debug(
            f"Suite '{self._name}' complete: {summary.passed} passed, "
            f"{summary.failed} failed"
        )
        return summary

    def run(
        self,
        reporter: ConsoleReporter | None = None,
        logger: logging.Logger | None = None,
    ) -> int:
        """Run the suite and return the number of failed cases."""
        return self.execute(reporter=reporter, logger=logger).failed

    def __call__(self, policy: ExitCodePolicy = "capped") -> int:
        """Entry-point form: run with console output, return the exit status."""
        return exit_status(self.run(), policy)


def run_tests(*cases: TestCase, name: str = "main") -> Suite:
    """Declare a run of ``cases`` in the given order.

    Example:

        @test_case
        def sum_test(t):
            t.expect(2 + 2, 4)

        main = run_tests(sum_test)

        if __name__ == "__main__":
            raise SystemExit(main())
    """
    return Suite(name, cases)
