# topmark:header:start
#
#   project      : Akaer
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Pytest configuration for the Akaer test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `make_config` (a `MutableConfig` frozen into a `Config`), and
    never mutate a frozen `Config`. To tweak one, `thaw()` it, edit the
    builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from akaer.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from akaer.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the developer's shell and home directory out of the tests.

    ``HOME`` points to a fresh directory, so neither ``~/.akaer.toml`` nor
    ``~/Library/LaunchAgents`` of the real user is ever read or written.

    Returns:
        Path: The temporary home directory.
    """
    monkeypatch.delenv("AKAER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    home: Path = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE during the test run."""
    logging.setup_logging(level=logging.TRACE_LEVEL, enable_color=False)


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a builder holding the defaults updated with ``overrides``.

    Args:
        **overrides (Any): Field values, e.g. ``dry_run=True`` or ``addresses=[...]``.

    Returns:
        MutableConfig: The builder, ready to be frozen or further edited.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for name, value in overrides.items():
        if not hasattr(m, name):
            raise AttributeError(f"MutableConfig has no field {name!r}")
        setattr(m, name, value)
    return m


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from the defaults and ``overrides``."""
    return make_mutable_config(**overrides).freeze()


class RecordingRunner:
    """Command runner double recording every command it is given.

    Args:
        fail_on (str | None): Commands containing this text fail.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.commands: list[str] = []

    def __call__(self, command: str) -> bool:
        self.commands.append(command)
        return self.fail_on is None or self.fail_on not in command
