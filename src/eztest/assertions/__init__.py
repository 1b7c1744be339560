"""Expectation engine used inside test case bodies."""

from eztest.assertions.base import ForcedFailure, machine_word
from eztest.assertions.expectations import Expectations

__all__ = ["Expectations", "ForcedFailure", "machine_word"]
