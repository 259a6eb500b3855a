"""Discovery of the ohmybug executable."""

from __future__ import annotations

import logging
from pathlib import Path

from bugbridge.config import BridgeConfig, home_dir
from bugbridge.errors import ProcessTimeoutError
from bugbridge.runner import ProcessRunner

logger = logging.getLogger(__name__)


def _on_disk(candidate: str) -> bool:
    # an unreadable parent directory counts as absent
    try:
        return Path(candidate).exists()
    except OSError:
        return False


def candidate_paths(config: BridgeConfig) -> list[str]:
    """Ordered candidates: home install, system installs, then the bare name.

    Recomputed on every call so a tool installed mid-session is picked up.
    """
    candidates: list[str] = []
    home = home_dir()
    if home is not None:
        candidates.append(str(home / config.home_relative_path))
    candidates.extend(config.system_paths)
    candidates.append(config.binary_name)
    return candidates


async def resolve(config: BridgeConfig, runner: ProcessRunner) -> str | None:
    """Return the first candidate that answers the version flag, or None."""
    for candidate in candidate_paths(config):
        # The bare command name can't be checked on disk; PATH lookup happens at spawn.
        if candidate != config.binary_name and not _on_disk(candidate):
            logger.debug("skipping %s: not on disk", candidate)
            continue

        if await health_check(candidate, config, runner):
            logger.debug("resolved ohmybug at %s", candidate)
            return candidate

    logger.debug("no usable %s candidate", config.binary_name)
    return None


async def health_check(candidate: str, config: BridgeConfig, runner: ProcessRunner) -> bool:
    try:
        outcome = await runner.execute(candidate, [config.version_flag])
    except (OSError, ProcessTimeoutError) as exc:
        logger.debug("health-check of %s failed: %s", candidate, exc)
        return False
    return outcome.exit_success
