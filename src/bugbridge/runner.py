"""Process-spawn abstraction used by every bridge operation."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from bugbridge.errors import ProcessTimeoutError
from bugbridge.models import ProcessOutcome

logger = logging.getLogger(__name__)


@runtime_checkable
class ProcessRunner(Protocol):
    async def execute(self, binary: str, args: Sequence[str]) -> ProcessOutcome:
        """Run ``binary`` with ``args`` to completion and capture both streams.

        Raises ``OSError`` when the process cannot be started.
        """
        ...


class AsyncioRunner:
    """Runs commands with ``asyncio.create_subprocess_exec``."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    async def execute(self, binary: str, args: Sequence[str]) -> ProcessOutcome:
        logger.debug("exec %s %s", binary, " ".join(args))
        proc = await asyncio.create_subprocess_exec(
            binary, *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            raise ProcessTimeoutError(binary, self.timeout) from None

        logger.debug("%s exited with %s", binary, proc.returncode)
        return ProcessOutcome(
            exit_success=proc.returncode == 0,
            returncode=proc.returncode,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )
