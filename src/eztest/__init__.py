"""Minimal soft-assertion unit test harness.

Declare cases with ``@test_case``, assemble them in order with ``run_tests``,
and use the resulting suite as the program's entry point.
"""

from eztest.assertions import Expectations, ForcedFailure
from eztest.case import TestCase, test_case
from eztest.results import RunSummary, TestCaseInfo, Verdict
from eztest.runner import Suite, exit_status, run_tests

__all__ = [
    "Expectations",
    "ForcedFailure",
    "RunSummary",
    "Suite",
    "TestCase",
    "TestCaseInfo",
    "Verdict",
    "exit_status",
    "run_tests",
    "test_case",
]
