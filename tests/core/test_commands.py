# topmark:header:start
#
#   project      : Akaer
#   file         : test_commands.py
#   file_relpath : tests/core/test_commands.py
#   license      : MIT
#   copyright    : (c) 2012-2025 Shogun
#
# topmark:header:end

"""Tests for alias command rendering and execution."""

from __future__ import annotations

import subprocess
from typing import Any

import pytest

from akaer.constants import DEFAULT_ADD_COMMAND, DEFAULT_REMOVE_COMMAND
from akaer.core.commands import execute_command, render_command


def test_render_default_add_command() -> None:
    assert (
        render_command(DEFAULT_ADD_COMMAND, "lo0", "10.0.0.3")
        == "sudo ifconfig lo0 alias 10.0.0.3 > /dev/null 2>&1"
    )


def test_render_default_remove_command() -> None:
    assert (
        render_command(DEFAULT_REMOVE_COMMAND, "en0", "::1")
        == "sudo ifconfig en0 -alias ::1 > /dev/null 2>&1"
    )


def test_render_replaces_every_placeholder() -> None:
    template = "echo @INTERFACE@ @ALIAS@ @INTERFACE@ @ALIAS@"
    assert render_command(template, "lo0", "10.0.0.1") == (
        "echo lo0 10.0.0.1 lo0 10.0.0.1 > /dev/null 2>&1"
    )


def test_render_without_placeholders() -> None:
    assert render_command("true", "lo0", "10.0.0.1") == "true > /dev/null 2>&1"


def test_execute_command_reports_exit_status() -> None:
    assert execute_command("exit 0") is True
    assert execute_command("exit 3") is False


def test_execute_command_reports_spawn_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(*_args: Any, **_kwargs: Any) -> None:
        raise OSError("no shell")

    monkeypatch.setattr(subprocess, "run", _fail)

    assert execute_command("true") is False


def test_execute_command_rejects_embedded_nul_byte() -> None:
    assert execute_command("echo 10.0.0.1\x00") is False
