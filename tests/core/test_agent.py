# topmark:header:start
#
#   project      : Akaer
#   file         : test_agent.py
#   file_relpath : tests/core/test_agent.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Tests for the launch agent lifecycle."""

from __future__ import annotations

import logging
import plistlib
import sys
from pathlib import Path

import pytest

from akaer.core.agent import (
    UNSUPPORTED_PLATFORM_MESSAGE,
    LaunchAgent,
    LaunchAgentManager,
    launch_agent_path,
)
from tests.conftest import RecordingRunner, make_config

ARGV: list[str] = ["/usr/local/bin/akaer", "-i", "en0", "-n", "3", "install"]


def _manager(runner: RecordingRunner, **overrides: object) -> LaunchAgentManager:
    return LaunchAgentManager(
        make_config(**overrides), runner=runner, argv=ARGV, platform="darwin"
    )


def test_launch_agent_path(isolated_environment: Path) -> None:
    assert launch_agent_path() == (
        isolated_environment / "Library" / "LaunchAgents" / "it.cowtech.akaer.plist"
    )
    assert launch_agent_path("foo").as_posix().endswith("Library/LaunchAgents/foo.plist")


def test_launch_agent_for_invocation_drops_the_action() -> None:
    agent = LaunchAgent.for_invocation(ARGV)

    assert agent.to_plist() == {
        "KeepAlive": False,
        "Label": "it.cowtech.akaer",
        "Program": "/usr/local/bin/akaer",
        "ProgramArguments": ["-i", "en0", "-n", "3"],
        "RunAtLoad": True,
    }


def test_launch_agent_for_module_invocation_runs_the_interpreter() -> None:
    agent = LaunchAgent.for_invocation(
        ["/opt/lib/python3/site-packages/akaer/__main__.py", "-i", "en0", "install"]
    )

    assert agent.program == sys.executable
    assert agent.program_arguments == ("-m", "akaer", "-i", "en0")


def test_install_writes_converts_and_loads(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    runner = RecordingRunner()
    manager = _manager(runner)

    assert manager.install() is True

    path: Path = manager.path
    with path.open("rb") as fh:
        assert plistlib.load(fh)["ProgramArguments"] == ["-i", "en0", "-n", "3"]
    assert runner.commands == [
        f"plutil -convert binary1 {path}",
        f"launchctl load -w {path} > /dev/null 2>&1",
    ]
    assert f"Creating the launch agent in {path} ..." in caplog.messages
    assert "Loading the launch agent ..." in caplog.messages


def test_install_stops_when_conversion_fails(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    runner = RecordingRunner(fail_on="plutil")

    assert _manager(runner).install() is False

    assert len(runner.commands) == 1
    assert "Cannot create the launch agent." in caplog.messages


def test_install_reports_load_failure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    assert _manager(RecordingRunner(fail_on="launchctl")).install() is False
    assert "Cannot load the launch agent." in caplog.messages


def test_install_reports_unwritable_descriptor(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    blocker: Path = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    runner = RecordingRunner()
    manager = LaunchAgentManager(
        make_config(),
        runner=runner,
        argv=ARGV,
        platform="darwin",
        path=blocker / "agent.plist",
    )

    assert manager.install() is False
    assert runner.commands == []
    assert "Cannot create the launch agent." in caplog.messages


def test_install_reports_argument_unfit_for_a_property_list(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)
    runner = RecordingRunner()
    manager = LaunchAgentManager(
        make_config(),
        runner=runner,
        argv=["/usr/local/bin/akaer", "-i", "en\x010", "install"],
        platform="darwin",
    )

    assert manager.install() is False
    assert runner.commands == []
    assert not manager.path.exists()
    assert "Cannot create the launch agent." in caplog.messages


def test_uninstall_unloads_and_deletes(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    runner = RecordingRunner()
    manager = _manager(runner)
    manager.path.parent.mkdir(parents=True)
    manager.path.write_bytes(b"")

    assert manager.uninstall() is True

    assert not manager.path.exists()
    assert runner.commands == [f"launchctl unload -w {manager.path} > /dev/null 2>&1"]
    assert f"Deleting the launch agent {manager.path} ..." in caplog.messages


def test_uninstall_continues_after_unload_failure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    manager = _manager(RecordingRunner(fail_on="unload"))
    manager.path.parent.mkdir(parents=True)
    manager.path.write_bytes(b"")

    assert manager.uninstall() is True

    assert not manager.path.exists()
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings == ["Cannot unload the launch agent."]


def test_uninstall_missing_descriptor(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    assert _manager(RecordingRunner()).uninstall() is False

    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings == ["Cannot delete the launch agent."]


@pytest.mark.parametrize("quiet", [False, True])
def test_unsupported_platform(quiet: bool, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    runner = RecordingRunner()
    manager = LaunchAgentManager(
        make_config(quiet=quiet), runner=runner, argv=ARGV, platform="linux"
    )

    assert manager.install() is False
    assert manager.uninstall() is False

    assert runner.commands == []
    assert not manager.path.exists()
    fatal = [r.getMessage() for r in caplog.records if r.levelno == logging.CRITICAL]
    assert fatal == [UNSUPPORTED_PLATFORM_MESSAGE, UNSUPPORTED_PLATFORM_MESSAGE]


def test_quiet_install_failure_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    assert _manager(RecordingRunner(fail_on="launchctl"), quiet=True).install() is False
    assert [r for r in caplog.records if r.levelno >= logging.INFO] == []
