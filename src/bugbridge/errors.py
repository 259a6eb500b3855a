"""Error taxonomy for bridge operations.

Every error carries a user-facing message as ``str(exc)`` so callers can
surface it as-is.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for failures reported back to the caller."""


class CLINotFoundError(BridgeError):
    """No candidate binary passed discovery."""

    def __init__(self, binary_name: str = "ohmybug") -> None:
        super().__init__(f"{binary_name} CLI not found")
        self.binary_name = binary_name


class SpawnError(BridgeError):
    """The subprocess could not be started."""

    def __init__(self, context: str, cause: OSError) -> None:
        super().__init__(f"{context}: {cause}")
        self.cause = cause


class ScanFailedError(BridgeError):
    """The scan exited non-zero without writing anything to stdout."""

    def __init__(self, stderr: str) -> None:
        super().__init__(f"Scan failed: {stderr}")
        self.stderr = stderr


class ProcessTimeoutError(BridgeError):
    def __init__(self, binary: str, timeout: float) -> None:
        super().__init__(f"{binary} did not finish within {timeout:g}s")
        self.binary = binary
        self.timeout = timeout


class ConfigError(BridgeError):
    """The configuration file or an override is unusable."""
