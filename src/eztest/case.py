"""Test case declaration."""

from __future__ import annotations

import logging
from typing import Callable

from eztest.assertions import Expectations, ForcedFailure
from eztest.reporting.console import ConsoleReporter
from eztest.results import TestCaseInfo

CaseBody = Callable[[Expectations], None]

DEFAULT_LOGGER_NAME = "eztest"


class TestCase:
    """A named body of test logic, invoked once per suite run.

    Calling the case runs the body against fresh counters and writes them into
    ``out`` when the body returns or calls ``force_fail``. Any other exception
    escapes unchanged; the harness does not isolate cases from each other.
    """

    __test__ = False

    def __init__(self, body: CaseBody, name: str | None = None) -> None:
        self._body = body
        self._name = name or body.__name__

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"TestCase({self._name!r})"

    def __call__(
        self,
        out: TestCaseInfo,
        reporter: ConsoleReporter | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        reporter = reporter or ConsoleReporter()
        logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

        expectations = Expectations(reporter, logger, case_name=self._name)
        reporter.case_started(self._name)
        logger.debug(f"Running test case '{self._name}'")
        try:
            self._body(expectations)
        except ForcedFailure:
            logger.debug(f"Test case '{self._name}' forced to fail")
        except Exception as e:
            logger.error(f"Test case '{self._name}' raised {type(e).__name__}: {e}")
            raise
        expectations.info.copy_to(out)


def test_case(
    target: CaseBody | str | None = None,
) -> TestCase | Callable[[CaseBody], TestCase]:
    """Declare a test case.

    Usable bare (``@test_case``), in which case the function name names the
    case, or with an explicit name (``@test_case("sum works")``).
    """
    if callable(target):
        return TestCase(target)

    def decorator(body: CaseBody) -> TestCase:
        return TestCase(body, name=target)

    return decorator


# not a pytest test function
test_case.__test__ = False
