"""JSON output for GUI callers."""

from __future__ import annotations

import json

from bugbridge.models import ScanResult


def render_json(result: ScanResult) -> str:
    """Render a scan result as JSON; a missing summary is emitted as null."""
    return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)


def render_error(message: str) -> str:
    return json.dumps({"error": message}, ensure_ascii=False)
