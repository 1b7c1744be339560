from __future__ import annotations

import sys
from typing import TextIO

from eztest.assertions.base import WORD_MASK, signed_word
from eztest.results import RunSummary, TestCaseInfo

SEPARATOR = "-" * 80


def format_word(word: int) -> str:
    """Render a machine word as ``<decimal>(0x<hex>)``."""
    return f"{signed_word(word)}(0x{word & WORD_MASK:x})"


class ConsoleReporter:
    """Line-oriented, human-readable report writer.

    The stream is any object with ``write``; it is flushed after every line so
    output from a case that crashes the run is not lost.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _line(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def case_started(self, name: str) -> None:
        self._line(f"Executing test '{name}'...")

    def expectation_failed(self, line: int, actual: int, expected: int) -> None:
        self._line(
            f"Failed expectation. Line: {line}. "
            f"actual: {format_word(actual)} expected: {format_word(expected)}"
        )

    def case_finished(self, info: TestCaseInfo) -> None:
        self._line(
            f"{info.verdict.value} "
            f"({info.passed_expectations}/{info.total_expectations})"
        )
        self._line(SEPARATOR)

    def summary(self, summary: RunSummary) -> None:
        self._line(
            f"Executed tests: {summary.total} "
            f"({summary.passed} passed, {summary.failed} failed)."
        )
