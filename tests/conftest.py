"""Shared fixtures: a scripted stand-in for the process runner."""

from collections.abc import Callable

import pytest

from bugbridge import locator
from bugbridge.config import BridgeConfig
from bugbridge.models import ProcessOutcome

VERSION_OK = ProcessOutcome(exit_success=True, returncode=0, stdout="ohmybug 1.0.0\n")


def outcome(stdout: str = "", stderr: str = "", ok: bool = True) -> ProcessOutcome:
    return ProcessOutcome(exit_success=ok, returncode=0 if ok else 1, stdout=stdout, stderr=stderr)


class FakeRunner:
    """Records every call and answers from a handler.

    The handler gets ``(binary, args)`` and returns a ProcessOutcome or an
    exception instance to raise.
    """

    def __init__(self, handler: Callable[[str, list[str]], object] | None = None):
        self.calls: list[tuple[str, list[str]]] = []
        self.handler = handler or (lambda binary, args: VERSION_OK)

    async def execute(self, binary, args):
        self.calls.append((binary, list(args)))
        result = self.handler(binary, list(args))
        if isinstance(result, BaseException):
            raise result
        return result


def scan_handler(scan_outcome) -> Callable[[str, list[str]], object]:
    """Health-checks succeed; everything else returns ``scan_outcome``."""

    def handler(binary, args):
        if args == ["--version"]:
            return VERSION_OK
        return scan_outcome

    return handler


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setattr(locator, "home_dir", lambda: home_dir)
    return home_dir


@pytest.fixture
def config(home):
    """Config whose only reachable candidate is the bare command name."""
    return BridgeConfig(system_paths=[])
