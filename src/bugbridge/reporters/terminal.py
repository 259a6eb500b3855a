"""Rich terminal reporter."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from bugbridge.models import ScanResult


def render_terminal(result: ScanResult, console: Console, title: str = "Scan") -> None:
    """Render a scan result to terminal using Rich."""
    console.print()

    status = "[green]succeeded[/]" if result.success else "[red]failed[/]"
    s = result.summary
    if s is None:
        summary_text = f"ohmybug {status}  | no summary available"
    else:
        summary_text = (
            f"ohmybug {status}  "
            f"[bold red]Critical: {s.critical}[/]  "
            f"[red]High: {s.high}[/]  "
            f"[yellow]Medium: {s.medium}[/]  "
            f"[cyan]Low: {s.low}[/]  "
            f"| Total: {s.total}"
        )
    console.print(Panel(summary_text, title=f"[bold]{title} Summary[/]"))

    if result.output:
        # Tool output may contain square brackets; don't parse it as markup
        console.print(Text(result.output))
