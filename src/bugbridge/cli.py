"""CLI entry point using Typer."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from rich.console import Console
from rich.text import Text

from bugbridge import __version__
from bugbridge.bridge import Bridge
from bugbridge.config import BridgeConfig, load_config
from bugbridge.errors import BridgeError
from bugbridge.log import setup_logging
from bugbridge.models import ScanResult

T = TypeVar("T")

app = typer.Typer(
    name="bugbridge",
    help="Run the ohmybug scanner and turn its output into structured results.",
    no_args_is_help=True,
)
console = Console()
_state: dict[str, str | None] = {}

ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="Config file path")
]
JsonOption = Annotated[bool, typer.Option("--json", help="Emit JSON instead of a report")]
TimeoutOption = Annotated[
    float | None, typer.Option("--timeout", "-t", help="Kill ohmybug after N seconds")
]


def version_callback(value: bool) -> None:
    if value:
        console.print(f"bugbridge {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (DEBUG, INFO, ...)")
    ] = None,
) -> None:
    """bugbridge: local bridge to the ohmybug scanner CLI."""
    _state["log_level"] = log_level
    setup_logging(log_level)


def _fail(exc: BridgeError, as_json: bool = False) -> typer.Exit:
    if as_json:
        from bugbridge.reporters.json_report import render_error

        typer.echo(render_error(str(exc)))
    else:
        console.print(Text(str(exc), style="red"))
    return typer.Exit(1)


def _make_bridge(
    config: Path | None, timeout: float | None = None, as_json: bool = False
) -> Bridge:
    try:
        cfg = load_config(config).with_overrides(timeout=timeout)
    except BridgeError as exc:
        raise _fail(exc, as_json) from None

    # --log-level wins over the config file
    if cfg.log_level and not _state.get("log_level"):
        setup_logging(cfg.log_level, force=True)
    return Bridge(cfg)


def _call(coro: Coroutine[Any, Any, T], as_json: bool = False) -> T:
    """Run one bridge operation; report BridgeError as text and exit 1."""
    try:
        return asyncio.run(coro)
    except BridgeError as exc:
        raise _fail(exc, as_json) from None


@app.command()
def scan(
    path: Annotated[Path, typer.Argument(help="Project directory to scan")],
    fix: Annotated[bool, typer.Option("--fix", help="Apply auto-fixes after the scan")] = False,
    as_json: JsonOption = False,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
) -> None:
    """Scan a project and show the severity summary."""
    bridge = _make_bridge(config, timeout, as_json)
    result = _call(bridge.scan(path, auto_fix=fix), as_json)
    _output_result(result, as_json, title="Scan")


@app.command()
def fix(
    path: Annotated[Path, typer.Argument(help="Project directory to fix")],
    as_json: JsonOption = False,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
) -> None:
    """Scan a project and apply fixes."""
    bridge = _make_bridge(config, timeout, as_json)
    result = _call(bridge.fix(path), as_json)
    _output_result(result, as_json, title="Fix")


@app.command()
def report(
    path: Annotated[Path, typer.Argument(help="Project directory to scan")],
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output file path")
    ] = None,
    timeout: TimeoutOption = None,
    config: ConfigOption = None,
) -> None:
    """Scan a project and print ohmybug's markdown report."""
    bridge = _make_bridge(config, timeout)
    text = _call(bridge.scan_report(path))

    if output:
        Path(output).write_text(text)
        console.print(f"[green]Report saved to {output}[/green]")
    else:
        typer.echo(text)


def _output_result(result: ScanResult, as_json: bool, title: str) -> None:
    if as_json:
        from bugbridge.reporters.json_report import render_json

        typer.echo(render_json(result))
        return

    from bugbridge.reporters.terminal import render_terminal

    render_terminal(result, console, title=title)


@app.command()
def status(config: ConfigOption = None) -> None:
    """Show whether ohmybug can be found and where."""
    from bugbridge.locator import candidate_paths, resolve

    bridge = _make_bridge(config)
    console.print(f"[bold]bugbridge[/bold] v{__version__}\n")
    console.print("[bold]Candidates:[/bold]")
    for candidate in candidate_paths(bridge.config):
        console.print(f"  {candidate}", markup=False, highlight=False)

    resolved = asyncio.run(resolve(bridge.config, bridge.runner))
    if resolved is None:
        console.print(f"\n[dim]✗[/dim] {bridge.config.binary_name} CLI not found")
        raise typer.Exit(1)

    version_text = _call(bridge.version())
    console.print(f"\n[green]✓[/green] {resolved} ({version_text})", highlight=False)


@app.command()
def available(
    direct: Annotated[
        bool, typer.Option("--direct", help="Probe the bare command name only")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Print true/false depending on whether ohmybug is usable."""
    bridge = _make_bridge(config)
    ok = asyncio.run(bridge.probe_command() if direct else bridge.is_available())
    typer.echo("true" if ok else "false")
    if not ok:
        raise typer.Exit(1)


@app.command(name="version")
def tool_version(config: ConfigOption = None) -> None:
    """Print the ohmybug version."""
    bridge = _make_bridge(config)
    typer.echo(_call(bridge.version()))


@app.command(name="config")
def config_show(config: ConfigOption = None) -> None:
    """Show current configuration."""
    try:
        cfg: BridgeConfig = load_config(config)
    except BridgeError as exc:
        raise _fail(exc) from None
    console.print_json(json.dumps(cfg.model_dump(), default=str))
