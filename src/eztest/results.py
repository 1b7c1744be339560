"""Result records produced by test cases and suite runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Verdict(str, Enum):
    PASS = "PASSED"
    FAIL = "FAILED"


@dataclass
class TestCaseInfo:
    """Outcome of a single test case invocation.

    Attributes:
        total_expectations: Number of expectations evaluated in the case.
        failed_expectations: Number of expectations that did not hold.
            Never exceeds total_expectations.
        verdict: PASS until the first failing expectation or forced failure,
            then FAIL for the rest of the case.
    """

    __test__ = False

    total_expectations: int = 0
    failed_expectations: int = 0
    verdict: Verdict = Verdict.PASS

    @property
    def passed_expectations(self) -> int:
        return self.total_expectations - self.failed_expectations

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS

    def copy_to(self, out: TestCaseInfo) -> None:
        """Write these counters into the caller-owned record."""
        out.total_expectations = self.total_expectations
        out.failed_expectations = self.failed_expectations
        out.verdict = self.verdict


@dataclass
class RunSummary:
    """Case counts for one suite run, in execution order."""

    name: str
    results: list[tuple[str, TestCaseInfo]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return sum(1 for _, info in self.results if not info.passed)

    @property
    def passed(self) -> int:
        return self.total - self.failed
