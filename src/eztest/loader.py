"""Import a test module and pick the suites to run from it."""

from __future__ import annotations

import hashlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from eztest.runner import Suite


class SuiteLoadError(Exception):
    """A test module could not be imported or does not declare the requested suites."""


def import_test_module(path: Path) -> ModuleType:
    """Import the Python file at ``path`` as a fresh module.

    The file's directory is put on ``sys.path`` first so the test module can
    import the code under test that sits beside it.
    """
    path = Path(path)
    if not path.is_file():
        raise SuiteLoadError(f"test file not found: {path}")

    test_dir = str(path.parent.resolve())
    if test_dir not in sys.path:
        sys.path.insert(0, test_dir)

    module_name = _module_name(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SuiteLoadError(f"cannot import {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise SuiteLoadError(f"cannot import {path}: {type(e).__name__}: {e}") from e
    return module


def _module_name(path: Path) -> str:
    # same stem in different directories must not share a sys.modules entry
    digest = hashlib.sha1(str(path.resolve()).encode()).hexdigest()[:10]
    return f"eztest_suite_{path.stem}_{digest}"


def load_suites(module: ModuleType) -> dict[str, Suite]:
    """Return the suites a module defines, keyed by suite name, in definition order."""
    suites: dict[str, Suite] = {}
    for value in vars(module).values():
        if not isinstance(value, Suite):
            continue
        existing = suites.setdefault(value.name, value)
        if existing is not value:
            raise SuiteLoadError(
                f"{module.__file__}: two different suites are named '{value.name}'"
            )
    return suites


def select_suites(suites: dict[str, Suite], names: list[str]) -> list[Suite]:
    """Pick suites by name, in the order given; all of them when ``names`` is empty."""
    if not suites:
        raise SuiteLoadError("no suites declared; assemble one with run_tests(...)")
    if not names:
        return list(suites.values())

    unknown = [name for name in names if name not in suites]
    if unknown:
        available = ", ".join(suites)
        raise SuiteLoadError(
            f"unknown suite(s): {', '.join(unknown)} (available: {available})"
        )
    return [suites[name] for name in names]
