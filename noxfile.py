"""Nox configuration for fieldrules quality assurance tasks."""

import nox  # pyright: ignore[reportMissingImports] # noqa: I001

PYTHON_VERSIONS = ["3.12", "3.13"]

LINT_TOOL = ["ruff", "check"]
LINT_PATHS = ["fieldrules/", "tests/"]
FORMAT_TOOL = ["ruff", "format"]
FORMAT_PATHS = ["fieldrules/", "tests/"]
TYPECHECK_TOOL = ["mypy"]
TYPECHECK_PATHS = ["fieldrules/"]


def get_lint_command(fix: bool = False) -> list[str]:
    """Get lint command for external use."""
    cmd = LINT_TOOL + LINT_PATHS
    if fix:
        cmd.append("--fix")
    return cmd


def get_format_command(check: bool = False) -> list[str]:
    """Get format command for external use."""
    cmd = FORMAT_TOOL + FORMAT_PATHS
    if check:
        cmd.extend(["--check", "--diff"])
    return cmd


@nox.session(python=PYTHON_VERSIONS)
def lint(session: nox.Session) -> None:
    """Run linting with ruff check."""
    session.install("-e", ".[dev]")
    session.run(*get_lint_command())


@nox.session(python=PYTHON_VERSIONS)
def lint_fix(session: nox.Session) -> None:
    """Run linting with ruff check and apply fixes."""
    session.install("-e", ".[dev]")
    session.run(*get_lint_command(fix=True))


@nox.session(python=PYTHON_VERSIONS)
def mypy(session: nox.Session) -> None:
    """Run type checking with mypy."""
    session.install("-e", ".[dev]")
    session.run(*TYPECHECK_TOOL, *TYPECHECK_PATHS)


@nox.session(python=PYTHON_VERSIONS)
def format_check(session: nox.Session) -> None:
    """Check code formatting with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*get_format_command(check=True))


@nox.session(python=PYTHON_VERSIONS)
def format(session: nox.Session) -> None:
    """Format code with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*get_format_command())


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run tests with pytest."""
    session.install("-e", ".[dev]")
    session.run("pytest", "--verbose")
