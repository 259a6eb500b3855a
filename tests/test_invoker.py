"""Tests for scan argument building and spawning."""

import asyncio
import logging

import pytest
from conftest import FakeRunner, outcome

from bugbridge import invoker
from bugbridge.errors import SpawnError
from bugbridge.models import OutputFormat


def test_build_args_plain_scan():
    assert invoker.build_args("check", "/src/app") == ["check", "/src/app", "--format", "json"]


def test_build_args_fix_and_markdown():
    args = invoker.build_args("check", "/src/app", fix=True, output_format=OutputFormat.MARKDOWN)
    assert args == ["check", "/src/app", "--format", "markdown", "--fix"]


def test_run_spawns_once_and_returns_outcome():
    expected = outcome(stdout='{"summary":{}}', ok=False)
    runner = FakeRunner(lambda binary, args: expected)

    result = asyncio.run(invoker.run(runner, "/usr/local/bin/ohmybug", "/src/app", fix=True))

    assert result == expected
    assert runner.calls == [
        ("/usr/local/bin/ohmybug", ["check", "/src/app", "--format", "json", "--fix"]),
    ]


def test_run_wraps_spawn_failure():
    runner = FakeRunner(lambda binary, args: PermissionError(13, "Permission denied"))

    with pytest.raises(SpawnError) as exc_info:
        asyncio.run(invoker.run(runner, "/usr/local/bin/ohmybug", "/src/app"))

    assert str(exc_info.value).startswith("Failed to execute ohmybug: ")
    assert "Permission denied" in str(exc_info.value)
    assert isinstance(exc_info.value.cause, PermissionError)


def test_run_logs_invocation_at_debug(caplog):
    runner = FakeRunner(lambda binary, args: outcome())
    with caplog.at_level(logging.DEBUG, logger="bugbridge.invoker"):
        asyncio.run(invoker.run(runner, "ohmybug", "/src/app"))

    records = [r for r in caplog.records if r.name == "bugbridge.invoker"]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)
