from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, NoReturn

from eztest.assertions.base import ForcedFailure, machine_word
from eztest.results import TestCaseInfo, Verdict

if TYPE_CHECKING:
    from eztest.reporting.console import ConsoleReporter


class Expectations:
    """Soft assertions for one test case invocation.

    Every check counts as one evaluated expectation. A failing check marks the
    case FAILED and lets the body carry on, so a single run can surface several
    independent failures. Only ``force_fail`` stops the body.
    """

    def __init__(
        self,
        reporter: ConsoleReporter,
        logger: logging.Logger,
        case_name: str = "",
    ) -> None:
        self._info = TestCaseInfo()
        self._reporter = reporter
        self._logger = logger
        self._case_name = case_name

    @property
    def info(self) -> TestCaseInfo:
        """Running counters of this invocation."""
        return self._info

    def _fail(self) -> None:
        self._info.failed_expectations += 1
        self._info.verdict = Verdict.FAIL

    def _evaluate(self, value: object, expected: object, depth: int) -> bool:
        # depth counts frames above this one; the caller's line is reported
        line = sys._getframe(depth).f_lineno
        self._info.total_expectations += 1
        actual_word = machine_word(value)
        expected_word = machine_word(expected)
        if actual_word == expected_word:
            return True
        self._fail()
        self._reporter.expectation_failed(line, actual_word, expected_word)
        self._logger.debug(
            f"Expectation failed in '{self._case_name}' at line {line}: "
            f"{value!r} != {expected!r}"
        )
        return False

    def expect(self, value: object, expected: object) -> bool:
        """Expect ``value`` and ``expected`` to be the same machine word."""
        return self._evaluate(value, expected, 2)

    def expect_zero(self, value: object) -> bool:
        return self._evaluate(value == 0, True, 2)

    def expect_not_zero(self, value: object) -> bool:
        return self._evaluate(value == 0, False, 2)

    def expect_buf(self, value: object, expected: object, size: int) -> bool:
        """Expect the first ``size`` bytes of two buffers to match.

        Counts as one expectation however large ``size`` is. Scanning stops at
        the first differing byte. Reading past the end of either buffer raises
        IndexError.
        """
        self._info.total_expectations += 1
        # nothing to read, so the operands are never touched
        if size <= 0:
            return True
        actual_bytes = memoryview(value).cast("B")
        expected_bytes = memoryview(expected).cast("B")
        for offset in range(size):
            if actual_bytes[offset] != expected_bytes[offset]:
                self._fail()
                self._logger.debug(
                    f"Buffer expectation failed in '{self._case_name}' "
                    f"at offset {offset}"
                )
                return False
        return True

    def force_fail(self) -> NoReturn:
        """Mark the case FAILED and abandon the rest of its body."""
        self._info.verdict = Verdict.FAIL
        raise ForcedFailure(self._case_name)
