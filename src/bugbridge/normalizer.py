"""Turns raw process output into a ScanResult."""

from __future__ import annotations

import json

from bugbridge.errors import ScanFailedError
from bugbridge.models import ProcessOutcome, ScanResult, ScanSummary


def select_output(stdout: str, stderr: str) -> str:
    """Prefer stdout; fall back to stderr so early failures stay visible."""
    return stdout if stdout else stderr


def parse_summary(text: str) -> ScanSummary | None:
    """Decode the ``summary`` object from JSON output, if there is one.

    Anything that is not a JSON object with a ``summary`` object yields None.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return None

    if not isinstance(data, dict):
        return None
    summary = data.get("summary")
    if not isinstance(summary, dict):
        return None
    return ScanSummary.from_json_object(summary)


def _check_failure(outcome: ProcessOutcome) -> None:
    if not outcome.exit_success and not outcome.stdout:
        raise ScanFailedError(outcome.stderr)


def normalize(outcome: ProcessOutcome, *, abort_on_failure: bool = False) -> ScanResult:
    """Build a ScanResult from a finished JSON-format run.

    With ``abort_on_failure`` a failed run that wrote nothing to stdout raises
    ScanFailedError instead of producing a result.
    """
    if abort_on_failure:
        _check_failure(outcome)

    output = select_output(outcome.stdout, outcome.stderr)
    return ScanResult(
        success=outcome.exit_success,
        output=output,
        summary=parse_summary(output),
    )


def normalize_report(outcome: ProcessOutcome) -> str:
    """Return the markdown report text untouched."""
    _check_failure(outcome)
    return select_output(outcome.stdout, outcome.stderr)
