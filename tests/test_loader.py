import textwrap

import pytest

from eztest.loader import SuiteLoadError, import_test_module, load_suites, select_suites
from eztest.runner import Suite


def _write_module(tmp_path, name, body):
    path = tmp_path / name
    path.write_text(textwrap.dedent(body))
    return path


@pytest.fixture
def two_suites(tmp_path):
    return _write_module(
        tmp_path,
        "two_suites.py",
        """
        from eztest import run_tests, test_case

        @test_case
        def a(t):
            t.expect(1, 1)

        @test_case
        def b(t):
            t.expect(1, 2)

        fast = run_tests(a, name="fast")
        slow = run_tests(a, b, name="slow")
        alias = fast
        """,
    )


def test_import_missing_file(tmp_path):
    with pytest.raises(SuiteLoadError, match="not found"):
        import_test_module(tmp_path / "nope.py")


def test_load_suites_in_definition_order(two_suites):
    suites = load_suites(import_test_module(two_suites))
    assert list(suites) == ["fast", "slow"]
    assert all(isinstance(s, Suite) for s in suites.values())


def test_select_all_when_no_names(two_suites):
    suites = load_suites(import_test_module(two_suites))
    assert [s.name for s in select_suites(suites, [])] == ["fast", "slow"]


def test_select_by_name_in_given_order(two_suites):
    suites = load_suites(import_test_module(two_suites))
    assert [s.name for s in select_suites(suites, ["slow", "fast"])] == ["slow", "fast"]


def test_select_unknown_name(two_suites):
    suites = load_suites(import_test_module(two_suites))
    with pytest.raises(SuiteLoadError, match="unknown suite.*missing.*available: fast, slow"):
        select_suites(suites, ["missing"])


def test_module_without_suites(tmp_path):
    path = _write_module(tmp_path, "no_suites.py", "x = 1\n")
    with pytest.raises(SuiteLoadError, match="no suites"):
        select_suites(load_suites(import_test_module(path)), [])


def test_conflicting_suite_names(tmp_path):
    path = _write_module(
        tmp_path,
        "clash.py",
        """
        from eztest import run_tests, test_case

        @test_case
        def a(t):
            pass

        one = run_tests(a)
        two = run_tests(a)
        """,
    )
    with pytest.raises(SuiteLoadError, match="named 'main'"):
        load_suites(import_test_module(path))


def test_import_error_becomes_load_error(tmp_path):
    path = _write_module(tmp_path, "broken.py", "raise RuntimeError('bad module')\n")
    with pytest.raises(SuiteLoadError, match="cannot import .*RuntimeError: bad module") as exc_info:
        import_test_module(path)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_syntax_error_becomes_load_error(tmp_path):
    path = _write_module(tmp_path, "typo.py", "def broken(:\n")
    with pytest.raises(SuiteLoadError, match="SyntaxError"):
        import_test_module(path)


def test_same_stem_in_different_directories(tmp_path):
    body = """
        from eztest import run_tests, test_case

        @test_case
        def only(t):
            pass

        {name} = run_tests(only, name="{name}")
        """
    (tmp_path / "one").mkdir()
    (tmp_path / "two").mkdir()
    first = _write_module(tmp_path / "one", "suite_tests.py", body.format(name="first"))
    second = _write_module(tmp_path / "two", "suite_tests.py", body.format(name="second"))

    first_module = import_test_module(first)
    second_module = import_test_module(second)

    assert first_module.__name__ != second_module.__name__
    assert list(load_suites(first_module)) == ["first"]
    assert list(load_suites(second_module)) == ["second"]


def test_module_can_import_sibling_code(tmp_path):
    _write_module(tmp_path, "unit_under_test_sibling.py", "def add(a, b):\n    return a + b\n")
    path = _write_module(
        tmp_path,
        "sibling_tests.py",
        """
        from eztest import run_tests, test_case
        from unit_under_test_sibling import add

        @test_case
        def sum_test(t):
            t.expect(add(2, 2), 4)

        main = run_tests(sum_test)
        """,
    )
    suites = load_suites(import_test_module(path))
    assert list(suites) == ["main"]
