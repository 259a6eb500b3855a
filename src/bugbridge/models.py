"""Data models for scanner invocations and their normalized results."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SUMMARY_FIELDS = ("total", "critical", "high", "medium", "low")


class OutputFormat(StrEnum):
    JSON = "json"
    MARKDOWN = "markdown"


class ProcessOutcome(BaseModel):
    """Raw result of one finished subprocess."""

    model_config = ConfigDict(frozen=True)

    exit_success: bool
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""


class ScanSummary(BaseModel):
    """Finding counts by severity, as reported by the scanner."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0)
    critical: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)

    @classmethod
    def from_json_object(cls, data: dict[str, Any]) -> ScanSummary:
        """Read the five counters, each falling back to 0 on its own."""
        return cls(**{name: _count(data.get(name)) for name in SUMMARY_FIELDS})


class ScanResult(BaseModel):
    """Normalized outcome of a scan or fix run."""

    model_config = ConfigDict(frozen=True)

    success: bool
    output: str = ""
    summary: ScanSummary | None = None


def _count(value: Any) -> int:
    # bool is an int subclass but never a count
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return 0
