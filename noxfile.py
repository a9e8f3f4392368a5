# topmark:header:start
#
#   project      : Akaer
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Akaer project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest.
  - `lint`: Ruff lint on the sources and tests.
  - `format_check`: Verify formatting with ruff.

Common invocations:
  - `nox -s lint`
  - `nox -s qa`
"""

from __future__ import annotations

import sys

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (per Python version)."""
    session.install("-e", ".[test]")

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("ruff")

    session.run("ruff", "check", "src", "tests", "noxfile.py")


@nox.session(python=CURRENT_PYTHON_VERSION)
def format_check(session: nox.Session) -> None:
    """Verify formatting."""
    session.install("ruff")

    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")
