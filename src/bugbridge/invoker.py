"""Runs one ohmybug scan against a project path."""

from __future__ import annotations

import logging
from pathlib import Path

from bugbridge.errors import SpawnError
from bugbridge.models import OutputFormat, ProcessOutcome
from bugbridge.runner import ProcessRunner

logger = logging.getLogger(__name__)


def build_args(
    subcommand: str,
    project_path: str,
    *,
    fix: bool = False,
    output_format: OutputFormat = OutputFormat.JSON,
) -> list[str]:
    args = [subcommand, project_path, "--format", output_format.value]
    if fix:
        args.append("--fix")
    return args


async def run(
    runner: ProcessRunner,
    binary: str,
    project_path: str,
    *,
    subcommand: str = "check",
    fix: bool = False,
    output_format: OutputFormat = OutputFormat.JSON,
) -> ProcessOutcome:
    """Spawn the scanner once and wait for it.

    A non-zero exit is returned as a normal outcome; only a failure to start
    the process raises.
    """
    args = build_args(subcommand, project_path, fix=fix, output_format=output_format)
    logger.debug("running %s on %s (fix=%s, format=%s)", binary, project_path, fix, output_format)
    try:
        return await runner.execute(binary, args)
    except OSError as exc:
        raise SpawnError(f"Failed to execute {Path(binary).name}", exc) from exc
