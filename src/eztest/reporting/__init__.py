"""Human-readable run reports."""

from eztest.reporting.console import SEPARATOR, ConsoleReporter

__all__ = ["ConsoleReporter", "SEPARATOR"]
