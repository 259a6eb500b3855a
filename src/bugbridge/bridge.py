"""Operations exposed to the presentation layer."""

from __future__ import annotations

import logging
from pathlib import Path

from bugbridge import invoker, locator
from bugbridge.config import BridgeConfig
from bugbridge.errors import BridgeError, CLINotFoundError, SpawnError
from bugbridge.models import OutputFormat, ScanResult
from bugbridge.normalizer import normalize, normalize_report
from bugbridge.runner import AsyncioRunner, ProcessRunner

logger = logging.getLogger(__name__)


class Bridge:
    """Locate ohmybug, run it, and normalize what it prints.

    Every call re-runs discovery; nothing is cached between calls.
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        self.config = config or BridgeConfig()
        self.runner = runner or AsyncioRunner(timeout=self.config.timeout)

    async def locate(self) -> str:
        path = await locator.resolve(self.config, self.runner)
        if path is None:
            raise CLINotFoundError(self.config.binary_name)
        return path

    async def scan(self, project_path: str | Path, auto_fix: bool = False) -> ScanResult:
        """Scan a project; a failed run with empty stdout raises ScanFailedError."""
        cli = await self.locate()
        outcome = await invoker.run(
            self.runner,
            cli,
            str(project_path),
            subcommand=self.config.subcommand,
            fix=auto_fix,
            output_format=OutputFormat.JSON,
        )
        return normalize(outcome, abort_on_failure=True)

    async def scan_report(self, project_path: str | Path) -> str:
        cli = await self.locate()
        outcome = await invoker.run(
            self.runner,
            cli,
            str(project_path),
            subcommand=self.config.subcommand,
            output_format=OutputFormat.MARKDOWN,
        )
        return normalize_report(outcome)

    async def fix(self, project_path: str | Path) -> ScanResult:
        """Scan and apply fixes. Always returns a result, even on failure."""
        cli = await self.locate()
        outcome = await invoker.run(
            self.runner,
            cli,
            str(project_path),
            subcommand=self.config.subcommand,
            fix=True,
            output_format=OutputFormat.JSON,
        )
        return normalize(outcome, abort_on_failure=False)

    async def is_available(self) -> bool:
        try:
            return await locator.resolve(self.config, self.runner) is not None
        except (BridgeError, OSError) as exc:
            logger.debug("availability check failed: %s", exc)
            return False

    async def probe_command(self) -> bool:
        """Check availability by running the bare command name directly."""
        try:
            outcome = await self.runner.execute(
                self.config.binary_name, [self.config.version_flag]
            )
        except (BridgeError, OSError) as exc:
            logger.debug("probe of %s failed: %s", self.config.binary_name, exc)
            return False
        return outcome.exit_success

    async def version(self) -> str:
        cli = await self.locate()
        try:
            outcome = await self.runner.execute(cli, [self.config.version_flag])
        except OSError as exc:
            raise SpawnError("Failed to get version", exc) from exc
        return outcome.stdout.strip()
