from __future__ import annotations

from pathlib import Path
import sys

import typer

app = typer.Typer(name="eztest", help="Run minimal soft-assertion unit test suites")

EXIT_USAGE = 2

EXAMPLE_TESTS = '''\
"""Example eztest suite. Run it with: eztest run example_tests.py"""

from eztest import run_tests, test_case


def add(a, b):
    return a + b


@test_case
def sum_test(t):
    t.expect(add(2, 2), 4)


@test_case
def zero_test(t):
    t.expect_zero(add(2, -2))
    t.expect_not_zero(add(2, 2))


@test_case
def buffer_test(t):
    t.expect_buf(b"hello", b"help!", 3)


main = run_tests(sum_test, zero_test, buffer_test)

if __name__ == "__main__":
    raise SystemExit(main())
'''

EXAMPLE_CONFIG = """\
# Suites to run, in order. Empty runs every suite the module defines.
suites: []
# Write the report here instead of stdout.
# output: reports/${RUN_NAME:-latest}.txt
debug_log: .eztest/debug.log
verbose: false
# capped: exit status is min(failed cases, 255); count: raw failed-case count
exit_code: capped
"""


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(EXIT_USAGE)


@app.command()
def run(
    path: str = typer.Argument(help="Python file declaring the suites"),
    suite: list[str] | None = typer.Option(
        None, "--suite", "-s", help="Run only this suite (repeatable, runs in order)"
    ),
    config: str | None = typer.Option(
        None, help="Path to eztest YAML config (default: eztest.yaml beside PATH)"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write the report to this file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Echo debug log to stderr"
    ),
    exit_code: str | None = typer.Option(
        None, "--exit-code", help="Exit status policy: capped or count"
    ),
):
    """Run the suites declared in a test file."""
    from eztest.config import DEFAULT_CONFIG_NAME, RunConfig, load_config
    from eztest.loader import SuiteLoadError, import_test_module, load_suites, select_suites
    from eztest.reporting.console import ConsoleReporter
    from eztest.runner import exit_status
    from eztest.verbose import setup_logger

    test_path = Path(path)
    if not test_path.is_file():
        raise _fail(f"test file not found: {path}")

    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            raise _fail(f"config file not found: {config}")
    else:
        config_path = test_path.parent / DEFAULT_CONFIG_NAME

    try:
        run_config = load_config(config_path) if config_path.exists() else RunConfig()
    except ValueError as e:
        raise _fail(f"invalid config {config_path}: {e}")

    suite_names = suite or run_config.suites
    output = output or run_config.output
    verbose = verbose or run_config.verbose
    policy = exit_code or run_config.exit_code
    if policy not in ("capped", "count"):
        raise _fail(f"--exit-code must be 'capped' or 'count', got '{policy}'")

    logger = setup_logger(Path(run_config.debug_log), verbose=verbose)
    logger.debug(f"Loading suites from {test_path}")

    try:
        module = import_test_module(test_path)
        suites = select_suites(load_suites(module), suite_names)
    except SuiteLoadError as e:
        logger.error(str(e))
        raise _fail(str(e))

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        stream = open(output_path, "w", encoding="utf-8")
    else:
        stream = sys.stdout

    try:
        reporter = ConsoleReporter(stream)
        failed = sum(s.run(reporter=reporter, logger=logger) for s in suites)
    finally:
        if output:
            stream.close()

    if output:
        typer.echo(f"Report: {output}")
    if not verbose:
        typer.echo(f"Debug log: {run_config.debug_log}", err=True)

    raise typer.Exit(exit_status(failed, policy))


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to create the example in"),
):
    """Write an example test module and eztest.yaml."""
    from eztest.config import DEFAULT_CONFIG_NAME

    project_dir = Path(dir)
    targets = {
        project_dir / "example_tests.py": EXAMPLE_TESTS,
        project_dir / DEFAULT_CONFIG_NAME: EXAMPLE_CONFIG,
    }

    existing = [str(p) for p in targets if p.exists()]
    if existing:
        typer.echo(f"Error: refusing to overwrite {', '.join(existing)}", err=True)
        raise typer.Exit(1)

    project_dir.mkdir(parents=True, exist_ok=True)
    for target, content in targets.items():
        target.write_text(content)
        typer.echo(f"Created {target}")

    typer.echo(f"Run it with: eztest run {project_dir / 'example_tests.py'}")


if __name__ == "__main__":
    app()
