# topmark:header:start
#
#   project      : Hydrant
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant project automation via Nox.

Sessions:
  - `lint`: Ruff lint on the repository.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any, cast

import nox
import tomlkit

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` with tomlkit.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table), empty when absent.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    return tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project_any = _parse_pyproject_toml().get("project")
    if not isinstance(project_any, dict):
        warnings.warn(
            "Could not find 'project' table in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    classifiers: list[str] = cast("list[str]", project_any.get("classifiers") or [])
    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in classifiers:
        v: str = c.removeprefix(prefix).strip() if c.startswith(prefix) else ""
        parts: list[str] = v.split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(f"{int(parts[0])}.{int(parts[1])}")

    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and pyright for one Python version."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver: str = session.python if isinstance(session.python, str) else CURRENT_PYTHON_VERSION
    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff lint checks."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:  # noqa: A001
    """Apply formatting."""
    session.install("ruff")
    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)
