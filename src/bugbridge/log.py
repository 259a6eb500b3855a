"""Logging helpers for bugbridge."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("BUGBRIDGE_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None, force: bool = False) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        force=force,
    )


__all__ = ["setup_logging"]
